"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2025-07-01

Schema:
- organizer, venue: owners and places
- event, event_date, time_slot: when an event runs
- ticket_type, inventory: what is sold, per time slot
- customer, user, order, ticket: who bought what

Surrogate ids are BIGINT and travel as strings on the wire; order ids stay
INTEGER because the dashboard searches orders by number.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create all tables."""

    # ========== STEP 1: Owners and places ==========
    op.create_table(
        'organizer',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('commission_rate', sa.Numeric(5, 2), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('slug'),
    )

    op.create_table(
        'venue',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=True),
        sa.Column('city', sa.String(length=120), nullable=True),
        sa.Column('state', sa.String(length=120), nullable=True),
        sa.Column('country', sa.String(length=120), nullable=True),
        sa.Column('total_capacity', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('slug'),
    )

    # ========== STEP 2: Events and their schedule ==========
    op.create_table(
        'event',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('organizer_id', sa.String(length=64), nullable=False),
        sa.Column('venue_id', sa.BigInteger(), nullable=True),
        sa.Column('venue_name', sa.String(length=255), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('doors_open', sa.DateTime(timezone=True), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('is_public', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['organizer_id'], ['organizer.id']),
        sa.ForeignKeyConstraint(['venue_id'], ['venue.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('slug'),
    )
    op.create_index(op.f('ix_event_organizer_id'), 'event', ['organizer_id'], unique=False)
    op.create_index(op.f('ix_event_status'), 'event', ['status'], unique=False)

    op.create_table(
        'event_date',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.BigInteger(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['event.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_event_date_event_id'), 'event_date', ['event_id'], unique=False)

    op.create_table(
        'time_slot',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('event_date_id', sa.BigInteger(), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('doors_open', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['event_date_id'], ['event_date.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_time_slot_event_date_id'), 'time_slot', ['event_date_id'], unique=False
    )

    # ========== STEP 3: What is sold ==========
    op.create_table(
        'ticket_type',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.BigInteger(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('max_per_order', sa.Integer(), nullable=False),
        sa.Column('min_per_order', sa.Integer(), nullable=False),
        sa.Column('sale_start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('sale_end_time', sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['event_id'], ['event.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_ticket_type_event_id'), 'ticket_type', ['event_id'], unique=False)

    op.create_table(
        'inventory',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('ticket_type_id', sa.BigInteger(), nullable=False),
        sa.Column('time_slot_id', sa.BigInteger(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.CheckConstraint('quantity >= 0', name='ck_inventory_quantity_non_negative'),
        sa.ForeignKeyConstraint(['ticket_type_id'], ['ticket_type.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['time_slot_id'], ['time_slot.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'ticket_type_id', 'time_slot_id', name='uq_inventory_ticket_type_slot'
        ),
    )
    op.create_index(
        op.f('ix_inventory_ticket_type_id'), 'inventory', ['ticket_type_id'], unique=False
    )
    op.create_index(op.f('ix_inventory_time_slot_id'), 'inventory', ['time_slot_id'], unique=False)

    # ========== STEP 4: Who bought what ==========
    op.create_table(
        'customer',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('first_name', sa.String(length=120), nullable=False),
        sa.Column('last_name', sa.String(length=120), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('event_types', sa.JSON(), nullable=False),
        sa.Column('last_login', sa.DateTime(timezone=True), nullable=True),
        sa.Column('balance', sa.Numeric(10, 2), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_customer_email'), 'customer', ['email'], unique=False)

    op.create_table(
        'user',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('first_name', sa.String(length=120), nullable=False),
        sa.Column('last_name', sa.String(length=120), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    op.create_table(
        'order',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('customer_id', sa.String(length=64), nullable=True),
        sa.Column('user_id', sa.String(length=64), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('payment_method', sa.String(length=50), nullable=True),
        sa.Column('payment_status', sa.String(length=20), nullable=True),
        sa.Column('transaction_id', sa.String(length=255), nullable=True),
        sa.Column('total_amount', sa.Numeric(10, 2), nullable=False),
        sa.Column(
            'ordered_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(['customer_id'], ['customer.id']),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_order_customer_id'), 'order', ['customer_id'], unique=False)
    op.create_index(op.f('ix_order_user_id'), 'order', ['user_id'], unique=False)
    op.create_index(op.f('ix_order_ordered_at'), 'order', ['ordered_at'], unique=False)

    op.create_table(
        'ticket',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('order_id', sa.Integer(), nullable=False),
        sa.Column('event_id', sa.BigInteger(), nullable=False),
        sa.Column('ticket_type_id', sa.BigInteger(), nullable=False),
        sa.Column('time_slot_id', sa.BigInteger(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('qr_code', sa.String(length=255), nullable=True),
        sa.Column('owner_name', sa.String(length=255), nullable=True),
        sa.Column('owner_email', sa.String(length=255), nullable=True),
        sa.Column(
            'purchase_date',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(['order_id'], ['order.id']),
        sa.ForeignKeyConstraint(['event_id'], ['event.id']),
        sa.ForeignKeyConstraint(['ticket_type_id'], ['ticket_type.id']),
        sa.ForeignKeyConstraint(['time_slot_id'], ['time_slot.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_ticket_order_id'), 'ticket', ['order_id'], unique=False)
    op.create_index(op.f('ix_ticket_event_id'), 'ticket', ['event_id'], unique=False)
    op.create_index(op.f('ix_ticket_ticket_type_id'), 'ticket', ['ticket_type_id'], unique=False)
    op.create_index(op.f('ix_ticket_time_slot_id'), 'ticket', ['time_slot_id'], unique=False)


def downgrade() -> None:
    """Drop all tables in reverse order of creation (indexes dropped automatically)."""
    op.drop_table('ticket')
    op.drop_table('order')
    op.drop_table('user')
    op.drop_table('customer')
    op.drop_table('inventory')
    op.drop_table('ticket_type')
    op.drop_table('time_slot')
    op.drop_table('event_date')
    op.drop_table('event')
    op.drop_table('venue')
    op.drop_table('organizer')
