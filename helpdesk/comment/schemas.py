# helpdesk/comment/schemas.py
from datetime import datetime
from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    text: str = Field(..., min_length=1, max_length=1000)
    author: str = Field(..., min_length=1, max_length=100)


class CommentView(BaseModel):
    id: int
    text: str
    author: str
    created_at: datetime

    model_config = {"frozen": True}
