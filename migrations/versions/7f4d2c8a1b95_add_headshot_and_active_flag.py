"""add headshot url and active flag to quarterbacks

Revision ID: 7f4d2c8a1b95
Revises: 3a1c9e2b7d40
Create Date: 2026-01-11 09:27:03.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "7f4d2c8a1b95"
down_revision = "3a1c9e2b7d40"
branch_labels = None
depends_on = None


def upgrade():
    op.add_column(
        "quarterbacks", sa.Column("headshot_url", sa.String(length=500), nullable=True)
    )
    op.add_column(
        "quarterbacks",
        sa.Column(
            "is_active", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
    )


def downgrade():
    op.drop_column("quarterbacks", "is_active")
    op.drop_column("quarterbacks", "headshot_url")
