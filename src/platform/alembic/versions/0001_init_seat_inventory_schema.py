"""init_seat_inventory_schema

Revision ID: 0001
Revises:
Create Date: 2026-01-10

Schema:
- auditorium: seat layout documents (layout / seat_map_config JSON)
- cinema_session: screenings, prices and their auditorium
- seat: one row per (session, row, number); status is a hint, holds and
  sales are the columns that matter
- cart: buyer carts, expires_at tracks the latest hold
- ticket: issued when a cart's holds are sold
- queue_counter / queue_entry: per-scope admission numbering
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name, sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
    )


def upgrade() -> None:
    op.create_table(
        'auditorium',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('layout', sa.JSON(), nullable=True),
        sa.Column('seat_map_config', sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'cinema_session',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('auditorium_id', sa.String(length=36), nullable=True),
        sa.Column('starts_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('base_price', sa.Integer(), nullable=False),
        sa.Column('vip_price', sa.Integer(), nullable=True),
        _timestamp('created_at'),
        sa.ForeignKeyConstraint(['auditorium_id'], ['auditorium.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_cinema_session_auditorium_id'), 'cinema_session', ['auditorium_id']
    )

    op.create_table(
        'seat',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('session_id', sa.String(length=36), nullable=False),
        sa.Column('row_label', sa.String(length=8), nullable=False),
        sa.Column('number', sa.Integer(), nullable=False),
        sa.Column('seat_id', sa.String(length=16), nullable=False),
        sa.Column('seat_type', sa.String(length=20), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('held_until', sa.DateTime(timezone=True), nullable=True),
        sa.Column('held_by_cart_id', sa.String(length=36), nullable=True),
        sa.Column('sold_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('sold_cart_id', sa.String(length=36), nullable=True),
        _timestamp('created_at'),
        _timestamp('updated_at'),
        sa.ForeignKeyConstraint(['session_id'], ['cinema_session.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'session_id', 'row_label', 'number', name='uq_seat_session_coordinate'
        ),
        sa.UniqueConstraint('session_id', 'seat_id', name='uq_seat_session_seat_id'),
    )
    op.create_index('ix_seat_status_held_until', 'seat', ['status', 'held_until'])
    op.create_index('ix_seat_held_by_cart_id', 'seat', ['held_by_cart_id'])

    op.create_table(
        'cart',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('session_id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        _timestamp('created_at'),
        _timestamp('updated_at'),
        sa.ForeignKeyConstraint(['session_id'], ['cinema_session.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_cart_session_id'), 'cart', ['session_id'])
    op.create_index('ix_cart_status_expires_at', 'cart', ['status', 'expires_at'])

    op.create_table(
        'ticket',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('session_id', sa.String(length=36), nullable=False),
        sa.Column('seat_row_id', sa.String(length=36), nullable=False),
        sa.Column('cart_id', sa.String(length=36), nullable=True),
        sa.Column('seat_type', sa.String(length=20), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        _timestamp('created_at'),
        sa.ForeignKeyConstraint(['session_id'], ['cinema_session.id']),
        sa.ForeignKeyConstraint(['seat_row_id'], ['seat.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('seat_row_id', name='uq_ticket_seat'),
    )
    op.create_index(op.f('ix_ticket_session_id'), 'ticket', ['session_id'])
    op.create_index(op.f('ix_ticket_cart_id'), 'ticket', ['cart_id'])

    op.create_table(
        'queue_counter',
        sa.Column('scope_key', sa.String(length=120), nullable=False),
        sa.Column('last_number', sa.Integer(), nullable=False),
        _timestamp('updated_at'),
        sa.PrimaryKeyConstraint('scope_key'),
    )

    op.create_table(
        'queue_entry',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('scope_key', sa.String(length=120), nullable=False),
        sa.Column('queue_number', sa.Integer(), nullable=False),
        sa.Column('visitor_token', sa.String(length=64), nullable=True),
        sa.Column('user_id', sa.String(length=36), nullable=True),
        sa.Column('cart_id', sa.String(length=36), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        _timestamp('created_at'),
        _timestamp('updated_at'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('scope_key', 'queue_number', name='uq_queue_entry_scope_number'),
    )
    op.create_index('ix_queue_entry_scope_visitor', 'queue_entry', ['scope_key', 'visitor_token'])
    op.create_index('ix_queue_entry_scope_status', 'queue_entry', ['scope_key', 'status'])


def downgrade() -> None:
    op.drop_table('queue_entry')
    op.drop_table('queue_counter')
    op.drop_table('ticket')
    op.drop_table('cart')
    op.drop_table('seat')
    op.drop_table('cinema_session')
    op.drop_table('auditorium')
