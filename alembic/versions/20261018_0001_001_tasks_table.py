"""Create the tasks table.

Revision ID: 001
Revises: None
Create Date: 2026-10-18

- tasks: id, title, completed, created_at, completed_at
- ix_tasks_completed_created_at for the pending-first, newest-first listing
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'tasks',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index(
        'ix_tasks_completed_created_at',
        'tasks',
        ['completed', 'created_at'],
    )


def downgrade() -> None:
    op.drop_index('ix_tasks_completed_created_at', table_name='tasks')
    op.drop_table('tasks')
