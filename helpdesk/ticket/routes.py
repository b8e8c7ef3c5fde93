# helpdesk/ticket/routes.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from helpdesk.core.database import get_db
from helpdesk.core.dispatcher import dispatch
from helpdesk.core.schemas import ApiResponse, IdPayload
from helpdesk.ticket.commands import ChangeTicketStatus, CreateTicket, DeleteTicket, UpdateTicket
from helpdesk.ticket.queries import GetTicketById, ListTickets
from helpdesk.ticket.schemas import (
    TicketCreate,
    TicketDetail,
    TicketStatusUpdate,
    TicketSummary,
    TicketUpdate,
)

router = APIRouter(prefix="/api/tickets", tags=["Tickets"])

TICKET_NOT_FOUND = "Ticket not found"


@router.post("", response_model=ApiResponse[IdPayload], status_code=201)
def create(ticket: TicketCreate, db: Session = Depends(get_db)):
    ticket_id = dispatch(db, CreateTicket(**ticket.model_dump()))
    return ApiResponse(success=True, message="Ticket created successfully", data=IdPayload(id=ticket_id))


@router.get("", response_model=ApiResponse[list[TicketSummary]])
def list_all(
    status: str | None = Query(default=None, description="Filter by status: Open, In Progress or Resolved"),
    priority: str | None = Query(default=None, description="Filter by priority: Low, Medium or High"),
    db: Session = Depends(get_db),
):
    items = dispatch(db, ListTickets(status=status, priority=priority))
    return ApiResponse(success=True, message=f"Found {len(items)} ticket(s)", data=items)


@router.get("/{ticket_id}", response_model=ApiResponse[TicketDetail])
def get(ticket_id: int, db: Session = Depends(get_db)):
    ticket = dispatch(db, GetTicketById(id=ticket_id))
    if not ticket:
        raise HTTPException(status_code=404, detail=TICKET_NOT_FOUND)
    return ApiResponse(success=True, message="Ticket retrieved successfully", data=ticket)


@router.put("/{ticket_id}", response_model=ApiResponse[IdPayload])
def update(ticket_id: int, ticket: TicketUpdate, db: Session = Depends(get_db)):
    if not dispatch(db, UpdateTicket(id=ticket_id, **ticket.model_dump())):
        raise HTTPException(status_code=404, detail=TICKET_NOT_FOUND)
    return ApiResponse(success=True, message="Ticket updated successfully", data=IdPayload(id=ticket_id))


@router.patch("/{ticket_id}/status", response_model=ApiResponse[IdPayload])
def change_status(ticket_id: int, body: TicketStatusUpdate, db: Session = Depends(get_db)):
    if not dispatch(db, ChangeTicketStatus(id=ticket_id, status=body.status)):
        raise HTTPException(status_code=404, detail=TICKET_NOT_FOUND)
    return ApiResponse(
        success=True,
        message=f"Ticket status updated to {body.status.value}",
        data=IdPayload(id=ticket_id),
    )


@router.delete("/{ticket_id}", response_model=ApiResponse[IdPayload])
def delete(ticket_id: int, db: Session = Depends(get_db)):
    if not dispatch(db, DeleteTicket(id=ticket_id)):
        raise HTTPException(status_code=404, detail=TICKET_NOT_FOUND)
    return ApiResponse(success=True, message="Ticket deleted successfully", data=IdPayload(id=ticket_id))
