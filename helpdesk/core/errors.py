# helpdesk/core/errors.py


class HelpdeskError(Exception):
    """Base class for errors raised by the ticket/comment core."""


class ReferentialError(HelpdeskError):
    """A comment was created against a ticket id that does not exist."""

    def __init__(self, ticket_id: int):
        self.ticket_id = ticket_id
        super().__init__(f"Ticket {ticket_id} does not exist")
