"""Create users, captains and blacklist_tokens tables

Revision ID: 4f1c2a9e7b10
Revises:
Create Date: 2026-10-19 18:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9e7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('firstname', sa.String(length=50), nullable=False),
        sa.Column('lastname', sa.String(length=50), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False, unique=True),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('socket_id', sa.String(length=100), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('length(firstname) <= 50', name='ck_users_firstname_len'),
    )
    op.create_index('idx_users_email', 'users', ['email'])

    op.create_table(
        'captains',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('firstname', sa.String(length=50), nullable=False),
        sa.Column('lastname', sa.String(length=50), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False, unique=True),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('socket_id', sa.String(length=100), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='inactive'),
        sa.Column('vehicle_color', sa.String(length=30), nullable=False),
        sa.Column('vehicle_plate', sa.String(length=20), nullable=False),
        sa.Column('vehicle_capacity', sa.Integer(), nullable=False),
        sa.Column('vehicle_type', sa.String(length=20), nullable=False),
        sa.Column('location_lat', sa.Float(), nullable=True),
        sa.Column('location_lng', sa.Float(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("status IN ('active', 'inactive')", name='ck_captains_status'),
    )
    op.create_index('idx_captains_email', 'captains', ['email'])
    op.create_index('idx_captains_status', 'captains', ['status'])

    op.create_table(
        'blacklist_tokens',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('token', sa.Text(), nullable=False, unique=True),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index('idx_blacklist_tokens_expires_at', 'blacklist_tokens', ['expires_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_blacklist_tokens_expires_at', table_name='blacklist_tokens')
    op.drop_table('blacklist_tokens')
    op.drop_index('idx_captains_status', table_name='captains')
    op.drop_index('idx_captains_email', table_name='captains')
    op.drop_table('captains')
    op.drop_index('idx_users_email', table_name='users')
    op.drop_table('users')
