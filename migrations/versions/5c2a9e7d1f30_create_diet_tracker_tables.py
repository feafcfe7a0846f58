"""create users, food_entries and photos

Revision ID: 5c2a9e7d1f30
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c2a9e7d1f30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('email', sa.String(length=255), nullable=False, unique=True),
            sa.Column('password', sa.String(length=255), nullable=False),
            sa.Column('name', sa.String(length=100), nullable=False),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )

    if not insp.has_table('food_entries'):
        op.create_table(
            'food_entries',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
            sa.Column('name', sa.String(length=200), nullable=False),
            sa.Column('calories', sa.Integer(), nullable=False),
            sa.Column('meal_type', sa.String(length=20), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_food_entries_user_created', 'food_entries', ['user_id', 'created_at'])

    if not insp.has_table('photos'):
        op.create_table(
            'photos',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
            sa.Column('filename', sa.String(length=255), nullable=False, unique=True),
            sa.Column('original_name', sa.String(length=255), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('calories', sa.Integer(), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_photos_user_created', 'photos', ['user_id', 'created_at'])


def downgrade():
    # Drop in reverse dependency order
    op.drop_index('ix_photos_user_created', table_name='photos')
    op.drop_table('photos')
    op.drop_index('ix_food_entries_user_created', table_name='food_entries')
    op.drop_table('food_entries')
    op.drop_table('users')
