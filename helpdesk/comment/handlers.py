# helpdesk/comment/handlers.py
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from helpdesk.comment import store as comment_store
from helpdesk.comment.commands import CreateComment, DeleteComment
from helpdesk.comment.mappers import to_comment_view
from helpdesk.comment.queries import GetCommentById, ListCommentsByTicket
from helpdesk.comment.schemas import CommentView
from helpdesk.core.errors import ReferentialError
from helpdesk.core.logging import get_logger

logger = get_logger(__name__)


def create_comment(db: Session, command: CreateComment) -> int:
    """Add a comment to a ticket.

    Raises:
        ReferentialError: the ticket does not exist; nothing is written.
    """
    try:
        comment_id = comment_store.insert_comment(
            db,
            command.ticket_id,
            {
                "text": command.text,
                "author": command.author,
                "created_at": datetime.now(timezone.utc),
            },
        )
    except ReferentialError:
        logger.warning("comment.orphan_rejected", ticket_id=command.ticket_id)
        raise
    logger.info("comment.created", comment_id=comment_id, ticket_id=command.ticket_id)
    return comment_id


def list_comments_by_ticket(db: Session, query: ListCommentsByTicket) -> list[CommentView]:
    return [to_comment_view(c) for c in comment_store.list_comments_by_ticket(db, query.ticket_id)]


def get_comment_by_id(db: Session, query: GetCommentById) -> CommentView | None:
    comment = comment_store.get_comment(db, query.id)
    if comment is None:
        logger.warning("comment.not_found", comment_id=query.id, operation="get")
        return None
    return to_comment_view(comment)


def delete_comment(db: Session, command: DeleteComment) -> bool:
    deleted = comment_store.delete_comment(db, command.id)
    if not deleted:
        logger.warning("comment.not_found", comment_id=command.id, operation="delete")
        return False
    logger.info("comment.deleted", comment_id=command.id)
    return True
