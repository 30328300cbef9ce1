"""create accounts, factions and items tables

Revision ID: 3f1c2a7d9b10
Revises:
Create Date: 2026-10-17
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c2a7d9b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "factions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("emoji_name", sa.String(length=100), nullable=False),
    )
    op.create_index(op.f("ix_factions_name"), "factions", ["name"], unique=False)

    op.create_table(
        "accounts",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("dollars", sa.Integer(), nullable=False, server_default=sa.text("100")),
        sa.Column("hp", sa.Integer(), nullable=False, server_default=sa.text("100")),
        sa.Column(
            "faction_id",
            sa.Uuid(),
            sa.ForeignKey("factions.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    op.create_index(op.f("ix_accounts_faction_id"), "accounts", ["faction_id"], unique=False)

    op.create_table(
        "items",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("owner_id", sa.String(length=64), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.Column("rarity_id", sa.Integer(), nullable=False),
        sa.Column("is_equipped", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_dropped", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("attributes", sa.JSON(), nullable=True),
    )
    op.create_index(op.f("ix_items_owner_id"), "items", ["owner_id"], unique=False)
    op.create_index(op.f("ix_items_name"), "items", ["name"], unique=False)
    op.create_index(op.f("ix_items_type_id"), "items", ["type_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_items_type_id"), table_name="items")
    op.drop_index(op.f("ix_items_name"), table_name="items")
    op.drop_index(op.f("ix_items_owner_id"), table_name="items")
    op.drop_table("items")
    op.drop_index(op.f("ix_accounts_faction_id"), table_name="accounts")
    op.drop_table("accounts")
    op.drop_index(op.f("ix_factions_name"), table_name="factions")
    op.drop_table("factions")
