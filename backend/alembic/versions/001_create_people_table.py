"""Create People table

Revision ID: 001
Revises: None
Create Date: 2025-01-06 00:00:00.000000+00:00

What:  Creates the `People` relation backing both repository strategies.
How:   Integer identity primary key, unbounded name columns, UTC timestamps.

Rollback: downgrade() drops the table entirely (destructive; all data lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the People table. See people_api/models/person.py for column docs."""
    op.create_table(
        "People",
        sa.Column("Id", sa.Integer(), autoincrement=True, nullable=False),
        # Length rules live in the request schemas; the store accepts any length
        sa.Column("FirstName", sa.String(), nullable=False),
        sa.Column("LastName", sa.String(), nullable=False),
        # Written once by the ADD audit stamp
        sa.Column("CreatedAt", sa.DateTime(timezone=True), nullable=False),
        # Refreshed by every UPDATE audit stamp
        sa.Column("UpdatedAt", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("Id"),
    )


def downgrade() -> None:
    """Drop the People table."""
    op.drop_table("People")
