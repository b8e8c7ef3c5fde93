# helpdesk/ticket/handlers.py
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from helpdesk.comment import store as comment_store
from helpdesk.core.logging import get_logger
from helpdesk.ticket import store as ticket_store
from helpdesk.ticket.commands import ChangeTicketStatus, CreateTicket, DeleteTicket, UpdateTicket
from helpdesk.ticket.mappers import to_ticket_detail, to_ticket_summary
from helpdesk.ticket.models import TicketStatus
from helpdesk.ticket.queries import GetTicketById, ListTickets
from helpdesk.ticket.schemas import TicketDetail, TicketSummary

logger = get_logger(__name__)


def create_ticket(db: Session, command: CreateTicket) -> int:
    ticket_id = ticket_store.insert_ticket(
        db,
        {
            "title": command.title,
            "description": command.description,
            "status": TicketStatus.OPEN.value,
            "priority": command.priority.value,
            "created_at": datetime.now(timezone.utc),
        },
    )
    logger.info("ticket.created", ticket_id=ticket_id, priority=command.priority.value)
    return ticket_id


def update_ticket(db: Session, command: UpdateTicket) -> bool:
    updated = ticket_store.update_ticket(
        db,
        command.id,
        {
            "title": command.title,
            "description": command.description,
            "status": command.status.value,
            "priority": command.priority.value,
        },
    )
    if not updated:
        logger.warning("ticket.not_found", ticket_id=command.id, operation="update")
        return False
    logger.info("ticket.updated", ticket_id=command.id, status=command.status.value)
    return True


def change_ticket_status(db: Session, command: ChangeTicketStatus) -> bool:
    # No transition rules: any status may follow any other.
    updated = ticket_store.update_ticket(db, command.id, {"status": command.status.value})
    if not updated:
        logger.warning("ticket.not_found", ticket_id=command.id, operation="change_status")
        return False
    logger.info("ticket.status_changed", ticket_id=command.id, status=command.status.value)
    return True


def delete_ticket(db: Session, command: DeleteTicket) -> bool:
    deleted = ticket_store.delete_ticket(db, command.id)
    if not deleted:
        logger.warning("ticket.not_found", ticket_id=command.id, operation="delete")
        return False
    logger.info("ticket.deleted", ticket_id=command.id)
    return True


def _matches(value: str, wanted: str | None) -> bool:
    return wanted is None or value.casefold() == wanted.casefold()


def list_tickets(db: Session, query: ListTickets) -> list[TicketSummary]:
    items = ticket_store.list_tickets(db)
    return [
        to_ticket_summary(t)
        for t in items
        if _matches(t.status, query.status) and _matches(t.priority, query.priority)
    ]


def get_ticket_by_id(db: Session, query: GetTicketById) -> TicketDetail | None:
    ticket = ticket_store.get_ticket(db, query.id)
    if ticket is None:
        logger.warning("ticket.not_found", ticket_id=query.id, operation="get")
        return None
    comments = comment_store.list_comments_by_ticket(db, ticket.id)
    return to_ticket_detail(ticket, comments)
