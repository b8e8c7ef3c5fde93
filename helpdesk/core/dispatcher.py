# helpdesk/core/dispatcher.py
# One explicit match from request type to handler; results pass through unchanged.
from typing import Any

from sqlalchemy.orm import Session

from helpdesk.comment import handlers as comment_handlers
from helpdesk.comment.commands import CreateComment, DeleteComment
from helpdesk.comment.queries import GetCommentById, ListCommentsByTicket
from helpdesk.ticket import handlers as ticket_handlers
from helpdesk.ticket.commands import ChangeTicketStatus, CreateTicket, DeleteTicket, UpdateTicket
from helpdesk.ticket.queries import GetTicketById, ListTickets

Request = (
    CreateTicket
    | UpdateTicket
    | ChangeTicketStatus
    | DeleteTicket
    | ListTickets
    | GetTicketById
    | CreateComment
    | ListCommentsByTicket
    | GetCommentById
    | DeleteComment
)


def dispatch(db: Session, request: Request) -> Any:
    match request:
        case CreateTicket():
            return ticket_handlers.create_ticket(db, request)
        case UpdateTicket():
            return ticket_handlers.update_ticket(db, request)
        case ChangeTicketStatus():
            return ticket_handlers.change_ticket_status(db, request)
        case DeleteTicket():
            return ticket_handlers.delete_ticket(db, request)
        case ListTickets():
            return ticket_handlers.list_tickets(db, request)
        case GetTicketById():
            return ticket_handlers.get_ticket_by_id(db, request)
        case CreateComment():
            return comment_handlers.create_comment(db, request)
        case ListCommentsByTicket():
            return comment_handlers.list_comments_by_ticket(db, request)
        case GetCommentById():
            return comment_handlers.get_comment_by_id(db, request)
        case DeleteComment():
            return comment_handlers.delete_comment(db, request)
        case _:
            raise TypeError(f"No handler for request type {type(request).__name__}")
