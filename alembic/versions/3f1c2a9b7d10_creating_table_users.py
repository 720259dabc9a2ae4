"""creating table users

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-09-02 14:10:05.512233+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('role', sa.String(length=12), nullable=False),
        sa.Column('person_type', sa.String(length=4), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('cpf', sa.String(length=11), nullable=True),
        sa.Column('rg', sa.String(length=50), nullable=True),
        sa.Column('cnpj', sa.String(length=14), nullable=True),
        sa.Column('company_name', sa.String(length=255), nullable=True),
        sa.Column('trade_name', sa.String(length=255), nullable=True),
        sa.Column('contact_name', sa.String(length=255), nullable=True),
        sa.Column('contact_email', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=11), nullable=False),
        sa.Column('services', sa.JSON(), nullable=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

def downgrade() -> None:
    op.drop_table('users')
