# helpdesk/comment/commands.py
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CreateComment:
    """Attach a comment to an existing ticket."""

    ticket_id: int
    text: str
    author: str


@dataclass(frozen=True, kw_only=True)
class DeleteComment:
    id: int
