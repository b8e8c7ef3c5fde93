# helpdesk/comment/mappers.py
from datetime import datetime, timezone

from helpdesk.comment.models import Comment
from helpdesk.comment.schemas import CommentView


def as_utc(value: datetime) -> datetime:
    """Timestamps are written as UTC; SQLite hands them back without tzinfo."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_comment_view(comment: Comment) -> CommentView:
    return CommentView(
        id=comment.id,
        text=comment.text,
        author=comment.author,
        created_at=as_utc(comment.created_at),
    )


def newest_first(comments) -> list[Comment]:
    """Order comments by creation time, most recent first; ties go to the higher id."""
    return sorted(comments, key=lambda c: (as_utc(c.created_at), c.id), reverse=True)
