"""create trip tables

Revision ID: 4e1d9a7c2b10
Revises:
Create Date: 2024-07-08 19:12:44.318205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4e1d9a7c2b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'trips',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('destination', sa.String(length=255), nullable=False),
        sa.Column('starts_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('ends_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('is_confirmed', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'participants',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('trip_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('trips.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('is_confirmed', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('is_owner', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_participants_trip_id', 'participants', ['trip_id'], unique=False)
    op.create_index('idx_participants_trip_id_email', 'participants', ['trip_id', 'email'], unique=True)
    op.create_table(
        'activities',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('trip_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('trips.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('occurs_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_activities_trip_id_occurs_at', 'activities', ['trip_id', 'occurs_at'], unique=False)
    op.create_table(
        'links',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('trip_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('trips.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('url', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_links_trip_id', 'links', ['trip_id'], unique=False)
    op.create_table(
        'email_notification_logs',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('trip_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('trips.id', ondelete='CASCADE'), nullable=False),
        sa.Column('participant_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('participants.id', ondelete='SET NULL'), nullable=True),
        sa.Column('email_address', sa.String(length=320), nullable=False),
        sa.Column('event_type', sa.String(length=50), nullable=False),
        sa.Column('subject', sa.String(length=500), nullable=False),
        sa.Column('status', sa.String(length=20), server_default='pending', nullable=False),
        sa.Column('provider_message_id', sa.String(length=255), nullable=True),
        sa.Column('error_message', sa.Text(), nullable=True),
        sa.Column('sent_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_email_notification_logs_trip_id_created_at', 'email_notification_logs', ['trip_id', 'created_at'], unique=False)
    op.create_index('idx_email_notification_logs_status', 'email_notification_logs', ['status'], unique=False)
    op.create_index('idx_email_notification_logs_event_type', 'email_notification_logs', ['event_type'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_email_notification_logs_event_type', table_name='email_notification_logs')
    op.drop_index('idx_email_notification_logs_status', table_name='email_notification_logs')
    op.drop_index('idx_email_notification_logs_trip_id_created_at', table_name='email_notification_logs')
    op.drop_table('email_notification_logs')
    op.drop_index('idx_links_trip_id', table_name='links')
    op.drop_table('links')
    op.drop_index('idx_activities_trip_id_occurs_at', table_name='activities')
    op.drop_table('activities')
    op.drop_index('idx_participants_trip_id_email', table_name='participants')
    op.drop_index('idx_participants_trip_id', table_name='participants')
    op.drop_table('participants')
    op.drop_table('trips')
