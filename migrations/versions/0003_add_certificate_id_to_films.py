"""add certificate_id to films

Revision ID: 0003
Revises: 0002
Create Date: 2024-03-11 09:52:47.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql

# revision identifiers, used by Alembic.
revision = '0003'
down_revision = '0002'
branch_labels = None
depends_on = None

UnsignedInt = sa.Integer().with_variant(mysql.INTEGER(unsigned=True), "mysql")

FK_NAME = 'fk_films_certificate_id_certificates'


def upgrade():
    # NOT NULL without a default: existing film rows must be cleared first
    with op.batch_alter_table('films', schema=None) as batch_op:
        batch_op.add_column(sa.Column('certificate_id', UnsignedInt, nullable=False))
        batch_op.create_foreign_key(
            batch_op.f(FK_NAME), 'certificates',
            ['certificate_id'], ['id'], ondelete='RESTRICT'
        )


def downgrade():
    with op.batch_alter_table('films', schema=None) as batch_op:
        batch_op.drop_constraint(batch_op.f(FK_NAME), type_='foreignkey')
        batch_op.drop_column('certificate_id')
