"""adding unique indexes to users table

Revision ID: c72a5e19f4b8
Revises: 8b4e6d2f0a31
Create Date: 2026-09-09 11:58:13.640127+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'c72a5e19f4b8'
down_revision: Union[str, Sequence[str], None] = '8b4e6d2f0a31'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_cpf', 'users', ['cpf'], unique=True)
    op.create_index('ix_users_cnpj', 'users', ['cnpj'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'], unique=False)

def downgrade() -> None:
    op.drop_index('ix_users_role', table_name='users')
    op.drop_index('ix_users_cnpj', table_name='users')
    op.drop_index('ix_users_cpf', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
