"""sales and invoice sequences

Revision ID: 8e2f4a6c0b17
Revises: 3a7c9e1b5d20
Create Date: 2025-09-04 16:30:00.000000
"""
from alembic import op
import sqlalchemy as sa


revision = "8e2f4a6c0b17"
down_revision = "3a7c9e1b5d20"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "sales",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("invoice_no", sa.String(length=15), nullable=False),
        sa.Column("establishment", sa.String(length=3), nullable=False),
        sa.Column("point_of_sale", sa.String(length=3), nullable=False),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id")),
        sa.Column("work_order_id", sa.Integer(), sa.ForeignKey("work_orders.id")),
        sa.Column("issued_at", sa.DateTime(), nullable=True),
        sa.Column("subtotal", sa.Numeric(14, 0), nullable=False),
        sa.Column("tax", sa.Numeric(14, 0), nullable=False),
        sa.Column("total", sa.Numeric(14, 0), nullable=False),
        sa.Column("payment_method", sa.String(length=13), nullable=False),
        sa.Column("tourism_regime", sa.Boolean(), nullable=False),
        sa.Column("timbrado_number", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.UniqueConstraint("invoice_no", name="uq_sales_invoice_no"),
    )
    op.create_index("ix_sales_issued_at", "sales", ["issued_at"])
    op.create_index("ix_sales_customer_id", "sales", ["customer_id"])
    op.create_index("ix_sales_pair", "sales", ["establishment", "point_of_sale"])
    op.create_table(
        "sale_items",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("sale_id", sa.Integer(), sa.ForeignKey("sales.id"), nullable=False),
        sa.Column("service_id", sa.Integer(), sa.ForeignKey("services.id")),
        sa.Column(
            "inventory_item_id", sa.Integer(), sa.ForeignKey("inventory_items.id")
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("unit_price", sa.Numeric(14, 0), nullable=False),
        sa.Column("subtotal", sa.Numeric(14, 0), nullable=False),
    )
    op.create_table(
        "invoice_sequences",
        sa.Column("establishment", sa.String(length=3), primary_key=True),
        sa.Column("point_of_sale", sa.String(length=3), primary_key=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("invoice_sequences")
    op.drop_table("sale_items")
    op.drop_index("ix_sales_pair", table_name="sales")
    op.drop_index("ix_sales_customer_id", table_name="sales")
    op.drop_index("ix_sales_issued_at", table_name="sales")
    op.drop_table("sales")
