"""add source to attempts

Revision ID: a41c07d9e2b5
Revises: base_0001
Create Date: 2026-10-19 11:40:27.508861

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a41c07d9e2b5"
down_revision: Union[str, Sequence[str], None] = "base_0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table("attempts") as batch:
        batch.add_column(
            sa.Column("source", sa.String(length=16), nullable=False, server_default="ocr")
        )


def downgrade() -> None:
    with op.batch_alter_table("attempts") as batch:
        batch.drop_column("source")
