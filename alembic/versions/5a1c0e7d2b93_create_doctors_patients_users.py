"""Create doctors, patients and users tables

Revision ID: 5a1c0e7d2b93
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5a1c0e7d2b93"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _address_columns() -> list[sa.Column]:
    return [
        sa.Column("street", sa.String(length=100), nullable=False, comment="Logradouro"),
        sa.Column("number", sa.String(length=20), nullable=False, comment="Numéro"),
        sa.Column("neighborhood", sa.String(length=100), nullable=False, comment="Bairro"),
        sa.Column("city", sa.String(length=100), nullable=False, comment="Ville"),
        sa.Column("state", sa.String(length=2), nullable=False, comment="UF (deux lettres)"),
        sa.Column("postal_code", sa.String(length=8), nullable=False, comment="CEP (8 chiffres)"),
        sa.Column("complement", sa.String(length=100), nullable=True, comment="Complément"),
    ]


def _timestamp_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "doctors",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("registration_number", sa.String(length=6), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=False),
        sa.Column(
            "specialty",
            sa.Enum(
                "ORTOPEDIA",
                "CARDIOLOGIA",
                "GINECOLOGIA",
                "DERMATOLOGIA",
                name="specialty",
                native_enum=False,
                length=20,
            ),
            nullable=False,
        ),
        *_address_columns(),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_doctors_id"), "doctors", ["id"], unique=False)
    op.create_index(
        op.f("ix_doctors_registration_number"), "doctors", ["registration_number"], unique=True
    )
    op.create_index(op.f("ix_doctors_is_active"), "doctors", ["is_active"], unique=False)

    op.create_table(
        "patients",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("national_id", sa.String(length=11), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=False),
        *_address_columns(),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_patients_id"), "patients", ["id"], unique=False)
    op.create_index(op.f("ix_patients_national_id"), "patients", ["national_id"], unique=True)
    op.create_index(op.f("ix_patients_is_active"), "patients", ["is_active"], unique=False)

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("login", sa.String(length=100), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=30), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_login"), "users", ["login"], unique=True)


def downgrade() -> None:
    op.drop_index(op.f("ix_users_login"), table_name="users")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")

    op.drop_index(op.f("ix_patients_is_active"), table_name="patients")
    op.drop_index(op.f("ix_patients_national_id"), table_name="patients")
    op.drop_index(op.f("ix_patients_id"), table_name="patients")
    op.drop_table("patients")

    op.drop_index(op.f("ix_doctors_is_active"), table_name="doctors")
    op.drop_index(op.f("ix_doctors_registration_number"), table_name="doctors")
    op.drop_index(op.f("ix_doctors_id"), table_name="doctors")
    op.drop_table("doctors")
