from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from snippetbox.extensions import db
from snippetbox.models import Comment, CommentVote, RecordNotFound, UPVOTE, DOWNVOTE

VOTE_VALUES = {UPVOTE: 1, DOWNVOTE: -1}

VOTE_REGISTERED = "Vote successfully registered!"
VOTE_REMOVED = "Vote removed!"
VOTE_UPDATED = {
    UPVOTE: "Vote updated to upvote!",
    DOWNVOTE: "Vote updated to downvote!",
}


def _commit(action: str) -> None:
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Comment store: %s failed", action)
        raise


# Comment services

def insert_comment(snippet_id: int, author: str, content: str) -> int:
    now = datetime.now(timezone.utc)
    comment = Comment(
        snippet_id=int(snippet_id),
        author=author,
        content=content,
        created=now,
        updated=now,
        upvotes=0,
    )
    db.session.add(comment)
    _commit("insert")

    current_app.logger.info("Comment %s added to snippet %s", comment.id, snippet_id)
    return comment.id


def get_comments_by_snippet(snippet_id: int) -> List[Comment]:
    """All comments of a snippet, oldest first. Empty list if there are none."""
    return (
        Comment.query
        .filter(Comment.snippet_id == int(snippet_id))
        .order_by(Comment.created.asc(), Comment.id.asc())
        .all()
    )


def get_comment(comment_id: int) -> Comment:
    comment = db.session.get(Comment, int(comment_id))
    if comment is None:
        raise RecordNotFound(f"comment {comment_id} not found")
    return comment


def update_comment(comment_id: int, content: str) -> None:
    # affected rows are not checked, a missing id is a no-op
    (
        Comment.query
        .filter(Comment.id == int(comment_id))
        .update(
            {Comment.content: content, Comment.updated: datetime.now(timezone.utc)},
            synchronize_session=False,
        )
    )
    _commit("update")


def delete_comment(comment_id: int) -> None:
    # vote rows of the comment are left behind
    deleted = (
        Comment.query
        .filter(Comment.id == int(comment_id))
        .delete(synchronize_session=False)
    )
    _commit("delete")
    current_app.logger.info("Comment %s deleted (rows=%s)", comment_id, deleted)


# Votes

def _vote_comment(comment_id: int, user_id: int, vote_type: str) -> str:
    """Toggle the user's vote on a comment and adjust the cached counter.

    Same polarity as the stored vote removes it, the other polarity flips it,
    no stored vote registers a new one. The counter moves by the difference
    between the new and the old vote value, so a flip counts twice.

    The lookup, the vote row change and the counter update are committed
    together; on failure nothing is applied and the error is re-raised.
    """
    comment_id = int(comment_id)
    user_id = int(user_id)
    value = VOTE_VALUES[vote_type]

    try:
        comment_vote = (
            CommentVote.query
            .filter_by(comment_id=comment_id, user_id=user_id)
            .with_for_update()
            .first()
        )
        old = VOTE_VALUES[comment_vote.vote_type] if comment_vote else 0

        if comment_vote is None:
            db.session.add(CommentVote(comment_id=comment_id, user_id=user_id, vote_type=vote_type))
            new = value
            message = VOTE_REGISTERED
        elif old == value:
            db.session.delete(comment_vote)
            new = 0
            message = VOTE_REMOVED
        else:
            comment_vote.vote_type = vote_type
            new = value
            message = VOTE_UPDATED[vote_type]

        (
            Comment.query
            .filter(Comment.id == comment_id)
            .update({Comment.upvotes: Comment.upvotes + (new - old)}, synchronize_session=False)
        )
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Comment store: %s on comment %s failed", vote_type, comment_id)
        raise

    _commit(vote_type)
    current_app.logger.debug(
        "Vote on comment %s by user %s: %+d -> %+d", comment_id, user_id, old, new
    )
    return message


def upvote_comment(comment_id: int, user_id: int) -> str:
    return _vote_comment(comment_id, user_id, UPVOTE)


def downvote_comment(comment_id: int, user_id: int) -> str:
    return _vote_comment(comment_id, user_id, DOWNVOTE)
