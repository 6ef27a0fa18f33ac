"""Create ledger tables

Revision ID: 3f1c2a9e5b10
Revises: 
Create Date: 2026-10-18 10:12:41.503317

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# Revision identifiers used by Alembic
revision: str = '3f1c2a9e5b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Products with their stock counters
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('initial_stock', sa.Integer(), nullable=False),
        sa.Column('delivered_quantity', sa.Integer(), nullable=False),
        sa.Column('sold_quantity', sa.Integer(), nullable=False),
        sa.Column('buying_price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('selling_price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.CheckConstraint('initial_stock >= 0'),
        sa.CheckConstraint('delivered_quantity >= 0'),
        sa.CheckConstraint('sold_quantity >= 0'),
        sa.CheckConstraint('buying_price >= 0'),
        sa.CheckConstraint('selling_price >= 0'),
        sa.CheckConstraint('sold_quantity <= delivered_quantity', name='ck_products_sold_le_delivered'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_products_id'), 'products', ['id'], unique=False)
    op.create_index(op.f('ix_products_name'), 'products', ['name'], unique=False)

    # Purchase orders
    op.create_table(
        'purchase_orders',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('product_name', sa.String(length=100), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('buying_price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('total_cost', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('status', sa.Enum('pending', 'delivered', name='purchaseorderstatus'), nullable=False),
        sa.Column('order_date', sa.Date(), nullable=False),
        sa.Column('delivery_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.CheckConstraint('quantity >= 1'),
        sa.CheckConstraint('buying_price >= 0'),
        sa.CheckConstraint('total_cost >= 0'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_purchase_orders_id'), 'purchase_orders', ['id'], unique=False)
    op.create_index(op.f('ix_purchase_orders_product_id'), 'purchase_orders', ['product_id'], unique=False)
    op.create_index(op.f('ix_purchase_orders_status'), 'purchase_orders', ['status'], unique=False)

    # Sales records, their lines and the seller registry
    op.create_table(
        'sales_records',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('seller_name', sa.String(), nullable=False),
        sa.Column('total_sales_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('total_due_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('cash_sale_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.CheckConstraint('total_sales_amount >= 0'),
        sa.CheckConstraint('total_due_amount >= 0'),
        sa.CheckConstraint('cash_sale_amount >= 0'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_sales_records_id'), 'sales_records', ['id'], unique=False)
    op.create_index(op.f('ix_sales_records_seller_name'), 'sales_records', ['seller_name'], unique=False)
    op.create_index(op.f('ix_sales_records_date'), 'sales_records', ['date'], unique=False)

    op.create_table(
        'sales_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('record_id', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('product_name', sa.String(length=100), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('selling_price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('total_price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.CheckConstraint('quantity >= 1'),
        sa.CheckConstraint('selling_price >= 0'),
        sa.CheckConstraint('total_price >= 0'),
        sa.ForeignKeyConstraint(['record_id'], ['sales_records.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_sales_items_id'), 'sales_items', ['id'], unique=False)
    op.create_index(op.f('ix_sales_items_record_id'), 'sales_items', ['record_id'], unique=False)
    op.create_index(op.f('ix_sales_items_product_id'), 'sales_items', ['product_id'], unique=False)

    op.create_table(
        'sellers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_sellers_id'), 'sellers', ['id'], unique=False)
    op.create_index(op.f('ix_sellers_name'), 'sellers', ['name'], unique=True)

    # Outstanding dues
    op.create_table(
        'due_entries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('seller_name', sa.String(), nullable=False),
        sa.Column('shop_name', sa.String(), nullable=False),
        sa.Column('due_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('date_added', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.CheckConstraint('due_amount > 0'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_due_entries_id'), 'due_entries', ['id'], unique=False)
    op.create_index(op.f('ix_due_entries_seller_name'), 'due_entries', ['seller_name'], unique=False)
    op.create_index(op.f('ix_due_entries_date_added'), 'due_entries', ['date_added'], unique=False)
    op.create_index(op.f('ix_due_entries_created_at'), 'due_entries', ['created_at'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('due_entries')
    op.drop_table('sellers')
    op.drop_table('sales_items')
    op.drop_table('sales_records')
    op.drop_table('purchase_orders')
    op.drop_table('products')
