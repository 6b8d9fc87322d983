"""Create properties and property_images tables

Revision ID: 0001_property_tables
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_property_tables'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'properties',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('category', sa.String(20), nullable=False, server_default='camping'),
        sa.Column('location', sa.String(255), nullable=False, server_default=''),
        sa.Column('price', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('price_note', sa.String(255), nullable=False, server_default=''),
        sa.Column('capacity', sa.Integer(), nullable=False, server_default='2'),
        sa.Column('max_capacity', sa.Integer(), nullable=False, server_default='4'),
        sa.Column('rating', sa.Float(), nullable=False, server_default='4.5'),
        sa.Column('is_top_selling', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('check_in_time', sa.String(50), nullable=False, server_default='2:00 PM'),
        sa.Column('check_out_time', sa.String(50), nullable=False, server_default='11:00 AM'),
        sa.Column('contact', sa.String(50), nullable=False, server_default=''),
        sa.Column('address', sa.Text(), nullable=False, server_default=''),
        sa.Column('amenities', sa.JSON(), nullable=False),
        sa.Column('highlights', sa.JSON(), nullable=False),
        sa.Column('activities', sa.JSON(), nullable=False),
        sa.Column('policies', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_properties_slug', 'properties', ['slug'], unique=True)
    op.create_index('ix_properties_is_active', 'properties', ['is_active'])

    # Images are deleted by the application before their property
    op.create_table(
        'property_images',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('property_id', sa.String(36), sa.ForeignKey('properties.id'), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_index(
        'ix_property_images_property_order', 'property_images', ['property_id', 'display_order']
    )


def downgrade() -> None:
    op.drop_index('ix_property_images_property_order', table_name='property_images')
    op.drop_table('property_images')
    op.drop_index('ix_properties_is_active', table_name='properties')
    op.drop_index('ix_properties_slug', table_name='properties')
    op.drop_table('properties')
