# helpdesk/ticket/schemas.py
from datetime import datetime
from pydantic import BaseModel, Field

from helpdesk.comment.schemas import CommentView
from helpdesk.ticket.models import TicketPriority, TicketStatus


class TicketBase(BaseModel):
    title: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., min_length=10, max_length=500)


class TicketCreate(TicketBase):
    priority: TicketPriority = TicketPriority.MEDIUM


class TicketUpdate(TicketBase):
    status: TicketStatus = TicketStatus.OPEN
    priority: TicketPriority = TicketPriority.MEDIUM


class TicketStatusUpdate(BaseModel):
    status: TicketStatus


# Projections returned by the query handlers

class TicketSummary(BaseModel):
    id: int
    title: str
    status: TicketStatus
    priority: TicketPriority
    created_at: datetime

    model_config = {"frozen": True}


class TicketDetail(TicketSummary):
    description: str
    comments: list[CommentView] = []
