# helpdesk/comment/store.py
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from helpdesk.core.database import commit_or_rollback
from helpdesk.core.errors import ReferentialError
from helpdesk.comment.models import Comment
from helpdesk.ticket.models import Ticket


def _ticket_exists(db: Session, ticket_id: int) -> bool:
    return db.query(Ticket.id).filter(Ticket.id == ticket_id).first() is not None


def insert_comment(db: Session, ticket_id: int, fields: dict[str, Any]) -> int:
    if not _ticket_exists(db, ticket_id):
        raise ReferentialError(ticket_id)

    db_comment = Comment(ticket_id=ticket_id, **fields)
    db.add(db_comment)
    try:
        commit_or_rollback(db)
    except IntegrityError as exc:
        # Ticket removed between the check and the insert
        if not _ticket_exists(db, ticket_id):
            raise ReferentialError(ticket_id) from exc
        raise
    db.refresh(db_comment)
    return db_comment.id


def get_comment(db: Session, comment_id: int) -> Comment | None:
    return db.query(Comment).filter(Comment.id == comment_id).first()


def list_comments_by_ticket(db: Session, ticket_id: int) -> list[Comment]:
    return (
        db.query(Comment)
        .filter(Comment.ticket_id == ticket_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .all()
    )


def delete_comment(db: Session, comment_id: int) -> bool:
    db_comment = get_comment(db, comment_id)
    if not db_comment:
        return False
    db.delete(db_comment)
    commit_or_rollback(db)
    return True
