"""create films table

Revision ID: 0001
Revises:
Create Date: 2024-03-04 10:12:31.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql

# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None

UnsignedInt = sa.Integer().with_variant(mysql.INTEGER(unsigned=True), "mysql")


def upgrade():
    op.create_table(
        'films',
        sa.Column('id', UnsignedInt, nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False, comment='Running time in minutes'),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_films')),
    )


def downgrade():
    op.drop_table('films')
