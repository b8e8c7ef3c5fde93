# helpdesk/comment/routes.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from helpdesk.core.database import get_db
from helpdesk.core.dispatcher import dispatch
from helpdesk.core.errors import ReferentialError
from helpdesk.core.schemas import ApiResponse, IdPayload
from helpdesk.comment.commands import CreateComment, DeleteComment
from helpdesk.comment.queries import GetCommentById, ListCommentsByTicket
from helpdesk.comment.schemas import CommentCreate, CommentView

router = APIRouter(prefix="/api", tags=["Comments"])


@router.post("/tickets/{ticket_id}/comments", response_model=ApiResponse[IdPayload], status_code=201)
def create(ticket_id: int, comment: CommentCreate, db: Session = Depends(get_db)):
    try:
        comment_id = dispatch(db, CreateComment(ticket_id=ticket_id, **comment.model_dump()))
    except ReferentialError as exc:
        raise HTTPException(status_code=404, detail="Ticket not found") from exc
    return ApiResponse(success=True, message="Comment added successfully", data=IdPayload(id=comment_id))


@router.get("/tickets/{ticket_id}/comments", response_model=ApiResponse[list[CommentView]])
def list_for_ticket(ticket_id: int, db: Session = Depends(get_db)):
    items = dispatch(db, ListCommentsByTicket(ticket_id=ticket_id))
    return ApiResponse(success=True, message=f"Found {len(items)} comment(s)", data=items)


@router.get("/comments/{comment_id}", response_model=ApiResponse[CommentView])
def get(comment_id: int, db: Session = Depends(get_db)):
    comment = dispatch(db, GetCommentById(id=comment_id))
    if not comment:
        raise HTTPException(status_code=404, detail="Comment not found")
    return ApiResponse(success=True, message="Comment retrieved successfully", data=comment)


@router.delete("/comments/{comment_id}", response_model=ApiResponse[IdPayload])
def delete(comment_id: int, db: Session = Depends(get_db)):
    if not dispatch(db, DeleteComment(id=comment_id)):
        raise HTTPException(status_code=404, detail="Comment not found")
    return ApiResponse(success=True, message="Comment deleted successfully", data=IdPayload(id=comment_id))
