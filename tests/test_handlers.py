# tests/test_handlers.py
import pytest
from structlog.testing import CapturingLogger

from helpdesk.comment import handlers as comment_handlers
from helpdesk.comment.commands import CreateComment, DeleteComment
from helpdesk.comment.models import Comment
from helpdesk.comment.queries import GetCommentById, ListCommentsByTicket
from helpdesk.core.dispatcher import dispatch
from helpdesk.core.errors import ReferentialError
from helpdesk.ticket import handlers as ticket_handlers
from helpdesk.ticket.commands import ChangeTicketStatus, CreateTicket, DeleteTicket, UpdateTicket
from helpdesk.ticket.models import TicketPriority, TicketStatus
from helpdesk.ticket.queries import GetTicketById, ListTickets
from helpdesk.ticket.schemas import TicketDetail


def new_ticket(db, title="Printer broken", priority=TicketPriority.MEDIUM):
    return dispatch(
        db,
        CreateTicket(title=title, description="Office printer jams on page 2", priority=priority),
    )


def test_create_then_get_uses_defaults(db):
    tid = dispatch(db, CreateTicket(title="VPN down", description="Cannot reach the VPN gateway"))

    detail = dispatch(db, GetTicketById(id=tid))
    assert isinstance(detail, TicketDetail)
    assert detail.title == "VPN down"
    assert detail.description == "Cannot reach the VPN gateway"
    assert detail.status == TicketStatus.OPEN
    assert detail.priority == TicketPriority.MEDIUM
    assert detail.comments == []


def test_get_missing_ticket_returns_none(db):
    assert dispatch(db, GetTicketById(id=1)) is None


def test_update_ticket_replaces_fields(db):
    tid = new_ticket(db)
    original = dispatch(db, GetTicketById(id=tid))

    ok = dispatch(
        db,
        UpdateTicket(
            id=tid,
            title="Printer fixed",
            description="Drum replaced, printing again",
            status=TicketStatus.RESOLVED,
            priority=TicketPriority.LOW,
        ),
    )
    assert ok is True

    updated = dispatch(db, GetTicketById(id=tid))
    assert updated.title == "Printer fixed"
    assert updated.status == TicketStatus.RESOLVED
    assert updated.priority == TicketPriority.LOW
    assert updated.id == original.id
    assert updated.created_at == original.created_at


def test_update_missing_ticket_returns_false(db):
    tid = new_ticket(db)
    ok = dispatch(db, UpdateTicket(id=tid + 10, title="Ghost", description="Does not exist anywhere"))
    assert ok is False
    assert dispatch(db, GetTicketById(id=tid)).title == "Printer broken"


def test_any_status_may_follow_any_other(db):
    tid = new_ticket(db)
    assert dispatch(db, ChangeTicketStatus(id=tid, status=TicketStatus.RESOLVED))
    assert dispatch(db, ChangeTicketStatus(id=tid, status=TicketStatus.OPEN))

    detail = dispatch(db, GetTicketById(id=tid))
    assert detail.status == TicketStatus.OPEN
    assert detail.title == "Printer broken"


def test_change_status_missing_ticket_returns_false(db):
    assert dispatch(db, ChangeTicketStatus(id=5, status=TicketStatus.IN_PROGRESS)) is False


def test_list_tickets_filters_case_insensitively(db):
    low = new_ticket(db, title="Mouse squeaks", priority=TicketPriority.LOW)
    high = new_ticket(db, title="Server on fire", priority=TicketPriority.HIGH)
    dispatch(db, ChangeTicketStatus(id=high, status=TicketStatus.IN_PROGRESS))

    assert {t.id for t in dispatch(db, ListTickets())} == {low, high}
    assert [t.id for t in dispatch(db, ListTickets(status="in progress"))] == [high]
    assert [t.id for t in dispatch(db, ListTickets(priority="LOW"))] == [low]
    assert dispatch(db, ListTickets(status="open", priority="high")) == []
    assert dispatch(db, ListTickets(status="closed")) == []


def test_summaries_leave_out_description_and_comments(db):
    new_ticket(db)
    summary = dispatch(db, ListTickets())[0]
    assert "description" not in summary.model_dump()
    assert "comments" not in summary.model_dump()


def test_comments_are_listed_newest_first(db):
    tid = new_ticket(db)
    first = dispatch(db, CreateComment(ticket_id=tid, text="A", author="Alice"))
    second = dispatch(db, CreateComment(ticket_id=tid, text="B", author="Bob"))

    views = dispatch(db, ListCommentsByTicket(ticket_id=tid))
    assert [v.id for v in views] == [second, first]
    assert [v.text for v in views] == ["B", "A"]


def test_create_comment_on_missing_ticket_raises(db):
    with pytest.raises(ReferentialError):
        dispatch(db, CreateComment(ticket_id=99, text="Hello", author="Alice"))
    assert db.query(Comment).count() == 0


def test_list_comments_for_unknown_ticket_is_empty(db):
    assert dispatch(db, ListCommentsByTicket(ticket_id=404)) == []


def test_get_comment_by_id(db):
    tid = new_ticket(db)
    cid = dispatch(db, CreateComment(ticket_id=tid, text="Checked toner", author="Alice"))

    view = dispatch(db, GetCommentById(id=cid))
    assert view.author == "Alice"
    assert view.text == "Checked toner"
    assert dispatch(db, GetCommentById(id=cid + 1)) is None


def test_delete_comment_twice(db):
    tid = new_ticket(db)
    cid = dispatch(db, CreateComment(ticket_id=tid, text="Checked toner", author="Alice"))

    assert dispatch(db, DeleteComment(id=cid)) is True
    assert dispatch(db, DeleteComment(id=cid)) is False
    assert dispatch(db, GetCommentById(id=cid)) is None


def test_delete_ticket_removes_its_comments(db):
    tid = new_ticket(db)
    for n in range(4):
        dispatch(db, CreateComment(ticket_id=tid, text=f"update {n}", author="Alice"))

    assert dispatch(db, DeleteTicket(id=tid)) is True
    assert dispatch(db, GetTicketById(id=tid)) is None
    assert dispatch(db, ListCommentsByTicket(ticket_id=tid)) == []
    assert db.query(Comment).count() == 0
    assert dispatch(db, DeleteTicket(id=tid)) is False


def test_unknown_request_type_is_rejected(db):
    with pytest.raises(TypeError):
        dispatch(db, object())


def test_printer_scenario(db):
    tid = dispatch(
        db,
        CreateTicket(
            title="Printer broken",
            description="Office printer jams on page 2",
            priority=TicketPriority.HIGH,
        ),
    )
    assert tid == 1
    assert dispatch(db, GetTicketById(id=tid)).status == TicketStatus.OPEN

    assert dispatch(db, CreateComment(ticket_id=tid, text="Checked toner", author="Alice")) == 1
    assert dispatch(db, CreateComment(ticket_id=tid, text="Replaced drum", author="Bob")) == 2

    detail = dispatch(db, GetTicketById(id=tid))
    assert detail.priority == TicketPriority.HIGH
    assert [(c.id, c.author) for c in detail.comments] == [(2, "Bob"), (1, "Alice")]

    assert dispatch(db, DeleteTicket(id=tid)) is True
    assert dispatch(db, GetTicketById(id=tid)) is None
    assert dispatch(db, ListCommentsByTicket(ticket_id=tid)) == []


def test_missing_ticket_lookup_logs_warning(db, monkeypatch):
    captured = CapturingLogger()
    monkeypatch.setattr(ticket_handlers, "logger", captured)

    assert dispatch(db, GetTicketById(id=8)) is None

    call = captured.calls[-1]
    assert call.method_name == "warning"
    assert call.args == ("ticket.not_found",)
    assert call.kwargs == {"ticket_id": 8, "operation": "get"}


def test_missing_comment_lookup_logs_warning(db, monkeypatch):
    captured = CapturingLogger()
    monkeypatch.setattr(comment_handlers, "logger", captured)

    assert dispatch(db, GetCommentById(id=3)) is None

    call = captured.calls[-1]
    assert call.method_name == "warning"
    assert call.args == ("comment.not_found",)
    assert call.kwargs == {"comment_id": 3, "operation": "get"}
