# helpdesk/ticket/store.py
from typing import Any

from sqlalchemy.orm import Session
from helpdesk.core.database import commit_or_rollback
from helpdesk.ticket.models import Ticket
from helpdesk.comment.models import Comment  # noqa: F401  (Ticket.comments target)

# id and created_at are fixed once a ticket exists
MUTABLE_FIELDS = frozenset({"title", "description", "status", "priority"})


def insert_ticket(db: Session, fields: dict[str, Any]) -> int:
    db_ticket = Ticket(**fields)
    db.add(db_ticket)
    commit_or_rollback(db)
    db.refresh(db_ticket)
    return db_ticket.id


def get_ticket(db: Session, ticket_id: int) -> Ticket | None:
    return db.query(Ticket).filter(Ticket.id == ticket_id).first()


def list_tickets(db: Session) -> list[Ticket]:
    return db.query(Ticket).order_by(Ticket.id).all()


def update_ticket(db: Session, ticket_id: int, fields: dict[str, Any]) -> bool:
    illegal = set(fields) - MUTABLE_FIELDS
    if illegal:
        raise ValueError(f"Ticket fields cannot be changed: {sorted(illegal)}")

    db_ticket = get_ticket(db, ticket_id)
    if not db_ticket:
        return False
    for field, value in fields.items():
        setattr(db_ticket, field, value)
    commit_or_rollback(db)
    return True


def delete_ticket(db: Session, ticket_id: int) -> bool:
    """Remove the ticket and every comment it owns in a single transaction."""
    db_ticket = get_ticket(db, ticket_id)
    if not db_ticket:
        return False
    db.delete(db_ticket)
    commit_or_rollback(db)
    return True
