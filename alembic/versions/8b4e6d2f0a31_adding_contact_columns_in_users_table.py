"""adding contact columns in users table

Revision ID: 8b4e6d2f0a31
Revises: 3f1c2a9b7d10
Create Date: 2026-09-09 11:32:47.081904+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8b4e6d2f0a31'
down_revision: Union[str, Sequence[str], None] = '3f1c2a9b7d10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column('users', sa.Column('contact_phone', sa.String(length=11), nullable=True))
    op.add_column('users', sa.Column('contact_cpf', sa.String(length=11), nullable=True))
    op.add_column('users', sa.Column('contact_rg', sa.String(length=50), nullable=True))
    op.add_column('users', sa.Column('contact_birth_date', sa.Date(), nullable=True))
    op.add_column('users', sa.Column('cnpj_card', sa.Text(), nullable=True))

def downgrade() -> None:
    with op.batch_alter_table('users') as batch_op:
        batch_op.drop_column('cnpj_card')
        batch_op.drop_column('contact_birth_date')
        batch_op.drop_column('contact_rg')
        batch_op.drop_column('contact_cpf')
        batch_op.drop_column('contact_phone')
