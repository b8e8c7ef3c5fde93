# helpdesk/ticket/commands.py
from dataclasses import dataclass

from helpdesk.ticket.models import TicketPriority, TicketStatus


@dataclass(frozen=True, kw_only=True)
class CreateTicket:
    """Open a new ticket. Status always starts at ``Open``."""

    title: str
    description: str
    priority: TicketPriority = TicketPriority.MEDIUM


@dataclass(frozen=True, kw_only=True)
class UpdateTicket:
    """Replace the editable fields of an existing ticket.

    Any status may be written regardless of the current one.
    """

    id: int
    title: str
    description: str
    status: TicketStatus = TicketStatus.OPEN
    priority: TicketPriority = TicketPriority.MEDIUM


@dataclass(frozen=True, kw_only=True)
class ChangeTicketStatus:
    """Move a ticket to another status, leaving the other fields untouched."""

    id: int
    status: TicketStatus


@dataclass(frozen=True, kw_only=True)
class DeleteTicket:
    """Delete a ticket together with all of its comments."""

    id: int
