from datetime import datetime, timezone

from werkzeug.security import generate_password_hash, check_password_hash
from flask_login import UserMixin
from sqlalchemy import CheckConstraint, UniqueConstraint

from snippetbox.extensions import db, login_manager

UPVOTE = 'upvote'
DOWNVOTE = 'downvote'


class RecordNotFound(Exception):
    """No matching record found."""


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))


class User(db.Model, UserMixin):
    __tablename__ = 'user'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False)
    password_hash = db.Column(db.String(256))

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<User {self.username}>'


class Comment(db.Model):
    __tablename__ = 'comments'

    id = db.Column(db.Integer, primary_key=True)
    # snippets live outside this app, no FK on purpose
    snippet_id = db.Column(db.Integer, nullable=False, index=True)
    author = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)

    created = db.Column(db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated = db.Column(db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    # cached aggregate, adjusted by the vote operations only
    upvotes = db.Column(db.Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Comment {self.id} snippet={self.snippet_id} author={self.author!r} upvotes={self.upvotes}>"


class CommentVote(db.Model):
    __tablename__ = 'comment_votes'

    id = db.Column(db.Integer, primary_key=True)
    # votes outlive deleted comments
    comment_id = db.Column(db.Integer, nullable=False, index=True)
    user_id = db.Column(db.Integer, nullable=False, index=True)
    vote_type = db.Column(db.String(8), nullable=False)

    __table_args__ = (
        UniqueConstraint('comment_id', 'user_id', name='uq_comment_votes_comment_user'),
        CheckConstraint("vote_type in ('upvote', 'downvote')", name='ck_comment_vote_type'),
    )

    def __repr__(self):
        return f"<CommentVote comment={self.comment_id} user={self.user_id} {self.vote_type}>"
