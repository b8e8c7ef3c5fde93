# helpdesk/comment/queries.py
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListCommentsByTicket:
    """Comments of one ticket, newest first.

    Does not check that the ticket exists; an unknown id gives an empty list.
    """

    ticket_id: int


@dataclass(frozen=True, kw_only=True)
class GetCommentById:
    id: int
