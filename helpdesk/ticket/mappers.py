# helpdesk/ticket/mappers.py
from collections.abc import Iterable

from helpdesk.comment.mappers import as_utc, newest_first, to_comment_view
from helpdesk.comment.models import Comment
from helpdesk.ticket.models import Ticket
from helpdesk.ticket.schemas import TicketDetail, TicketSummary


def to_ticket_summary(ticket: Ticket) -> TicketSummary:
    return TicketSummary(
        id=ticket.id,
        title=ticket.title,
        status=ticket.status,
        priority=ticket.priority,
        created_at=as_utc(ticket.created_at),
    )


def to_ticket_detail(ticket: Ticket, comments: Iterable[Comment]) -> TicketDetail:
    """Summary fields plus description and the comment thread, newest first."""
    return TicketDetail(
        id=ticket.id,
        title=ticket.title,
        description=ticket.description,
        status=ticket.status,
        priority=ticket.priority,
        created_at=as_utc(ticket.created_at),
        comments=[to_comment_view(c) for c in newest_first(comments)],
    )
