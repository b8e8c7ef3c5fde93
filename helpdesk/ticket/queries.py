# helpdesk/ticket/queries.py
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListTickets:
    """List ticket summaries.

    Attributes:
        status: Keep only tickets with this status (case-insensitive).
        priority: Keep only tickets with this priority (case-insensitive).
    """

    status: str | None = None
    priority: str | None = None


@dataclass(frozen=True, kw_only=True)
class GetTicketById:
    id: int
