"""Create users, settings, loads, fuel stops and audit log tables

Revision ID: 3f9c1a2b7d10
Revises:
Create Date: 2026-10-16 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# Revision identifiers used by Alembic
revision: str = '3f9c1a2b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'user_settings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('driver_pay_type', sa.String(), nullable=False),
        sa.Column('percentage_rate', sa.Float(), nullable=True),
        sa.Column('fuel_road_use_tax', sa.Float(), nullable=True),
        sa.Column('maintenance_reserve', sa.Float(), nullable=True),
        sa.Column('bond_deposit', sa.Float(), nullable=True),
        sa.Column('mrp_fee', sa.Float(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_settings_id'), 'user_settings', ['id'], unique=False)
    op.create_index(op.f('ix_user_settings_user_id'), 'user_settings', ['user_id'], unique=True)

    # Loads are keyed by PRO number
    op.create_table(
        'loads',
        sa.Column('pro_number', sa.String(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date_dispatched', sa.DateTime(timezone=True), nullable=False),
        sa.Column('date_delivered', sa.DateTime(timezone=True), nullable=True),
        sa.Column('origin_city', sa.String(), nullable=False),
        sa.Column('origin_state', sa.String(), nullable=False),
        sa.Column('destination_city', sa.String(), nullable=False),
        sa.Column('destination_state', sa.String(), nullable=False),
        sa.Column('deadhead_miles', sa.Float(), nullable=False),
        sa.Column('loaded_miles', sa.Float(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('driver_pay_type', sa.String(), nullable=False),
        sa.Column('linehaul', sa.Float(), nullable=True),
        sa.Column('fsc', sa.Float(), nullable=True),
        sa.Column('fsc_per_loaded_mile', sa.Float(), nullable=True),
        sa.Column('calculated_gross', sa.Float(), nullable=True),
        sa.Column('projected_net', sa.Float(), nullable=True),
        sa.Column('scale_cost', sa.Float(), nullable=True),
        sa.Column('total_deductions', sa.Float(), nullable=True),
        sa.Column('fuel_road_use_tax', sa.Float(), nullable=True),
        sa.Column('maintenance_reserve', sa.Float(), nullable=True),
        sa.Column('bond_deposit', sa.Float(), nullable=True),
        sa.Column('mrp_fee', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('pro_number'),
    )
    op.create_index(op.f('ix_loads_pro_number'), 'loads', ['pro_number'], unique=False)
    op.create_index(op.f('ix_loads_user_id'), 'loads', ['user_id'], unique=False)
    op.create_index(op.f('ix_loads_date_delivered'), 'loads', ['date_delivered'], unique=False)

    op.create_table(
        'fuel_stops',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('pro_number', sa.String(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date_of_stop', sa.DateTime(timezone=True), nullable=False),
        sa.Column('vendor', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('gallons_diesel_purchased', sa.Float(), nullable=True),
        sa.Column('diesel_price_per_gallon', sa.Float(), nullable=True),
        sa.Column('gallons_def_purchased', sa.Float(), nullable=True),
        sa.Column('def_price_per_gallon', sa.Float(), nullable=True),
        sa.Column('total_diesel_cost', sa.Float(), nullable=True),
        sa.Column('total_def_cost', sa.Float(), nullable=True),
        sa.Column('total_fuel_stop', sa.Float(), nullable=True),
        sa.Column('fuel_card_used', sa.Boolean(), nullable=False),
        sa.Column('discount_eligible', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['pro_number'], ['loads.pro_number']),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_fuel_stops_id'), 'fuel_stops', ['id'], unique=False)
    op.create_index(op.f('ix_fuel_stops_pro_number'), 'fuel_stops', ['pro_number'], unique=False)
    op.create_index(op.f('ix_fuel_stops_user_id'), 'fuel_stops', ['user_id'], unique=False)

    op.create_table(
        'logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('ts', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('action', sa.String(length=50), nullable=True),
        sa.Column('resource', sa.String(length=50), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=True),
        sa.Column('ip', sa.String(length=64), nullable=True),
        sa.Column('meta', sa.JSON(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_logs_id'), 'logs', ['id'], unique=False)
    op.create_index(op.f('ix_logs_ts'), 'logs', ['ts'], unique=False)
    op.create_index(op.f('ix_logs_action'), 'logs', ['action'], unique=False)
    op.create_index(op.f('ix_logs_resource'), 'logs', ['resource'], unique=False)
    op.create_index(op.f('ix_logs_status'), 'logs', ['status'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('logs')
    op.drop_table('fuel_stops')
    op.drop_table('loads')
    op.drop_table('user_settings')
    op.drop_table('users')
