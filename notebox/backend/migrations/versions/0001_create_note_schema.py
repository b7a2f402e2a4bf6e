"""Create account, user and note tables.

Revision ID: 0001_create_note_schema
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_create_note_schema"
down_revision = None
branch_labels = None
depends_on = None

# Partial index predicate shared by every tenant-scoped index
ACTIVE = sa.column("deleted") == sa.false()


def upgrade() -> None:
    op.create_table(
        "account",
        sa.Column("idAccount", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("dateCreated", sa.DateTime(), nullable=False),
        sa.Column("deleted", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.PrimaryKeyConstraint("idAccount", name="pkAccount"),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "user",
        sa.Column("idUser", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("idAccount", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("dateCreated", sa.DateTime(), nullable=False),
        sa.Column("deleted", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.PrimaryKeyConstraint("idUser", name="pkUser"),
        sa.ForeignKeyConstraint(["idAccount"], ["account.idAccount"], name="fkUser_Account"),
        sqlite_autoincrement=True,
    )
    op.create_index(
        "ixUser_Account",
        "user",
        ["idAccount", "idUser"],
        postgresql_where=ACTIVE,
        sqlite_where=ACTIVE,
    )

    op.create_table(
        "note",
        sa.Column("idNote", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("idAccount", sa.Integer(), nullable=False),
        sa.Column("idUser", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("dateCreated", sa.DateTime(), nullable=False),
        sa.Column("dateModified", sa.DateTime(), nullable=False),
        sa.Column("deleted", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.PrimaryKeyConstraint("idNote", name="pkNote"),
        sa.ForeignKeyConstraint(["idAccount"], ["account.idAccount"], name="fkNote_Account"),
        sa.ForeignKeyConstraint(["idUser"], ["user.idUser"], name="fkNote_User"),
        sa.CheckConstraint('"dateCreated" <= "dateModified"', name="ckNote_DateOrder"),
        sqlite_autoincrement=True,
    )
    op.create_index(
        "ixNote_Account",
        "note",
        ["idAccount"],
        postgresql_where=ACTIVE,
        sqlite_where=ACTIVE,
    )
    op.create_index(
        "ixNote_Account_User",
        "note",
        ["idAccount", "idUser"],
        postgresql_include=["title", "dateCreated", "dateModified"],
        postgresql_where=ACTIVE,
        sqlite_where=ACTIVE,
    )
    op.create_index(
        "ixNote_Account_DateCreated",
        "note",
        ["idAccount", sa.text('"dateCreated" DESC')],
        postgresql_include=["idUser", "title"],
        postgresql_where=ACTIVE,
        sqlite_where=ACTIVE,
    )


def downgrade() -> None:
    op.drop_index("ixNote_Account_DateCreated", table_name="note")
    op.drop_index("ixNote_Account_User", table_name="note")
    op.drop_index("ixNote_Account", table_name="note")
    op.drop_table("note")
    op.drop_index("ixUser_Account", table_name="user")
    op.drop_table("user")
    op.drop_table("account")
