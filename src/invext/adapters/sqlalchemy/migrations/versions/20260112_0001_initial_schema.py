"""Initial extension store schema.

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-01-12 09:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "extension",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("display_name", sa.String(), nullable=False),
        sa.Column("version", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_extension")),
    )
    op.create_table(
        "manufacturer",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("display_name", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_manufacturer")),
    )
    op.create_table(
        "classification",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("display_name", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_classification")),
    )
    op.create_table(
        "device",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("extension_id", sa.String(), nullable=False),
        sa.Column("display_name", sa.String(), nullable=False),
        sa.Column("manufacturer_id", sa.String(), nullable=False),
        sa.Column("classification_id", sa.String(), nullable=False),
        sa.Column("primary_model_identifiers", sa.JSON(), nullable=False),
        sa.Column("extended_model_identifiers", sa.JSON(), nullable=False),
        sa.ForeignKeyConstraint(
            ["extension_id"],
            ["extension.id"],
            name=op.f("fk_device_extension_id_extension"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["manufacturer_id"],
            ["manufacturer.id"],
            name=op.f("fk_device_manufacturer_id_manufacturer"),
        ),
        sa.ForeignKeyConstraint(
            ["classification_id"],
            ["classification.id"],
            name=op.f("fk_device_classification_id_classification"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_device")),
    )
    op.create_index(op.f("ix_device_extension_id"), "device", ["extension_id"], unique=False)
    op.create_table(
        "manufacturer_extension",
        sa.Column("manufacturer_id", sa.String(), nullable=False),
        sa.Column("extension_id", sa.String(), nullable=False),
        sa.ForeignKeyConstraint(
            ["manufacturer_id"],
            ["manufacturer.id"],
            name=op.f("fk_manufacturer_extension_manufacturer_id_manufacturer"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["extension_id"],
            ["extension.id"],
            name=op.f("fk_manufacturer_extension_extension_id_extension"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint(
            "manufacturer_id", "extension_id", name=op.f("pk_manufacturer_extension")
        ),
    )
    op.create_table(
        "classification_extension",
        sa.Column("classification_id", sa.String(), nullable=False),
        sa.Column("extension_id", sa.String(), nullable=False),
        sa.ForeignKeyConstraint(
            ["classification_id"],
            ["classification.id"],
            name=op.f("fk_classification_extension_classification_id_classification"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["extension_id"],
            ["extension.id"],
            name=op.f("fk_classification_extension_extension_id_extension"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint(
            "classification_id", "extension_id", name=op.f("pk_classification_extension")
        ),
    )


def downgrade() -> None:
    op.drop_table("classification_extension")
    op.drop_table("manufacturer_extension")
    op.drop_index(op.f("ix_device_extension_id"), table_name="device")
    op.drop_table("device")
    op.drop_table("classification")
    op.drop_table("manufacturer")
    op.drop_table("extension")
