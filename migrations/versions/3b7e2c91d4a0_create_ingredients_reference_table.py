"""Create ingredients reference table

Revision ID: 3b7e2c91d4a0
Revises:
Create Date: 2026-10-19 10:52:11.418302

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e2c91d4a0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'ingredients',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('fdc_id', sa.Integer(), nullable=True),
        sa.Column('calories_per_100g', sa.Float(), nullable=True),
        sa.Column('protein_g_per_100g', sa.Float(), nullable=True),
        sa.Column('carbs_g_per_100g', sa.Float(), nullable=True),
        sa.Column('fat_g_per_100g', sa.Float(), nullable=True),
        sa.Column('sodium_mg_per_100g', sa.Float(), nullable=True),
        sa.Column('usda_sync_date', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('ingredients', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_ingredients_name'), ['name'], unique=False)
        batch_op.create_index(batch_op.f('ix_ingredients_fdc_id'), ['fdc_id'], unique=False)


def downgrade():
    with op.batch_alter_table('ingredients', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_ingredients_fdc_id'))
        batch_op.drop_index(batch_op.f('ix_ingredients_name'))

    op.drop_table('ingredients')
