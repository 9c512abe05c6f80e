"""create user, comments and comment_votes tables

Revision ID: 5a1e3c9d7b20
Revises: 
Create Date: 2026-10-16 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5a1e3c9d7b20'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=64), nullable=False),
        sa.Column('password_hash', sa.String(length=256), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
    )

    op.create_table(
        'comments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('snippet_id', sa.Integer(), nullable=False),
        sa.Column('author', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created', sa.DateTime(), nullable=False),
        sa.Column('updated', sa.DateTime(), nullable=False),
        sa.Column('upvotes', sa.Integer(), nullable=False, server_default='0'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_comments_snippet_id', 'comments', ['snippet_id'], unique=False)

    op.create_table(
        'comment_votes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('comment_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('vote_type', sa.String(length=8), nullable=False),
        sa.CheckConstraint("vote_type in ('upvote', 'downvote')", name='ck_comment_vote_type'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('comment_id', 'user_id', name='uq_comment_votes_comment_user'),
    )
    op.create_index('ix_comment_votes_comment_id', 'comment_votes', ['comment_id'], unique=False)
    op.create_index('ix_comment_votes_user_id', 'comment_votes', ['user_id'], unique=False)


def downgrade():
    op.drop_index('ix_comment_votes_user_id', table_name='comment_votes')
    op.drop_index('ix_comment_votes_comment_id', table_name='comment_votes')
    op.drop_table('comment_votes')

    op.drop_index('ix_comments_snippet_id', table_name='comments')
    op.drop_table('comments')

    op.drop_table('user')
