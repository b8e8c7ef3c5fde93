# helpdesk/ticket/models.py
from enum import Enum

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from helpdesk.core.database import Base


class TicketStatus(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"


class TicketPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def _one_of(column: str, enum_cls: type[Enum]) -> str:
    values = ", ".join(f"'{member.value}'" for member in enum_cls)
    return f"{column} IN ({values})"


class Ticket(Base):
    __tablename__ = "tickets"
    __table_args__ = (
        CheckConstraint(_one_of("status", TicketStatus), name="ck_tickets_status"),
        CheckConstraint(_one_of("priority", TicketPriority), name="ck_tickets_priority"),
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), index=True, nullable=False)
    description = Column(String(500), nullable=False)
    status = Column(String(20), index=True, nullable=False)
    priority = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    # Comments live and die with their ticket
    comments = relationship(
        "Comment",
        back_populates="ticket",
        cascade="all, delete-orphan",
    )
