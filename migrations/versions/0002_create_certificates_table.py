"""create certificates table

Revision ID: 0002
Revises: 0001
Create Date: 2024-03-11 09:40:02.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql

# revision identifiers, used by Alembic.
revision = '0002'
down_revision = '0001'
branch_labels = None
depends_on = None

UnsignedInt = sa.Integer().with_variant(mysql.INTEGER(unsigned=True), "mysql")


def upgrade():
    op.create_table(
        'certificates',
        sa.Column('id', UnsignedInt, nullable=False),
        sa.Column('name', sa.String(length=2), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_certificates')),
    )


def downgrade():
    op.drop_table('certificates')
