"""Create users table

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the `users` table backing the /api/users resource.
How:   Integer autoincrement primary key; email indexed (not unique).

Rollback: downgrade() drops the table entirely (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the users table. Column docs live in app/models/user.py."""
    op.create_table(
        "users",

        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Server-generated identifier",
        ),

        sa.Column(
            "name",
            sa.String(100),
            nullable=False,
            comment="Display name (1-100 characters)",
        ),

        sa.Column(
            "email",
            sa.String(255),
            nullable=False,
            comment="Contact email address",
        ),

        sa.Column(
            "about",
            sa.Text(),
            nullable=True,
            comment="Free-text description",
        ),

        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("ix_users_email", "users", ["email"])


def downgrade() -> None:
    """
    Drop the users table entirely.

    WARNING: This is destructive — all user data will be permanently lost.
    """
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
