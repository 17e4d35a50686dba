"""Create record catalog tables

Revision ID: 5a1c0e7d9b42
Revises:
Create Date: 2025-09-20 18:04:11.201577

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5a1c0e7d9b42'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
        sa.UniqueConstraint('username'),
    )
    op.create_index('idx_users_email', 'users', ['email'])

    op.create_table(
        'tags',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('slug', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('slug', name='uq_tags_slug'),
    )

    op.create_table(
        'records',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('artist', sa.String(length=255), nullable=False),
        sa.Column('release_date', sa.Date(), nullable=False),
        sa.Column('cover_url', sa.String(length=2048), nullable=False),
        sa.Column('discogs_url', sa.String(length=2048), nullable=True),
        sa.Column('spotify_url', sa.String(length=2048), nullable=True),
        sa.Column('owned', sa.Boolean(), nullable=False),
        sa.Column('wanted', sa.Boolean(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_records_user_id', 'records', ['user_id'])
    op.create_index('idx_records_user_owned_wanted', 'records', ['user_id', 'owned', 'wanted'])

    op.create_table(
        'records_tags',
        sa.Column('record_id', sa.Integer(), nullable=False),
        sa.Column('tag_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['record_id'], ['records.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['tag_id'], ['tags.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('record_id', 'tag_id'),
    )
    op.create_index('idx_records_tags_tag_id', 'records_tags', ['tag_id'])

    op.create_table(
        'collection_tokens',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('token', sa.String(length=128), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('token'),
        sa.UniqueConstraint('user_id', name='uq_collection_tokens_user_id'),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('collection_tokens')
    op.drop_index('idx_records_tags_tag_id', table_name='records_tags')
    op.drop_table('records_tags')
    op.drop_index('idx_records_user_owned_wanted', table_name='records')
    op.drop_index('idx_records_user_id', table_name='records')
    op.drop_table('records')
    op.drop_table('tags')
    op.drop_index('idx_users_email', table_name='users')
    op.drop_table('users')
