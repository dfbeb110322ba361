"""create speedboats

Revision ID: 3f1c9a6d2b7e
Revises:
Create Date: 2026-10-18 10:21:37.512904

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f1c9a6d2b7e'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('speedboats',
                    sa.Column('id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), autoincrement=True, nullable=False),
                    sa.Column('brand', sa.Text(), nullable=True),
                    sa.Column('model_number', sa.Text(), nullable=False),
                    sa.Column('image_url', sa.Text(), nullable=True),
                    sa.Column('wholesale_price', sa.Float(), nullable=True),
                    sa.Column('retail_price', sa.Float(), nullable=True),
                    sa.Column('in_stock', sa.Boolean(), nullable=True),
                    sa.Column('created', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
                    sa.Column('modified', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
                    sa.PrimaryKeyConstraint('id'),
                    sa.UniqueConstraint('id')
                    )


def downgrade():
    op.drop_table('speedboats')
