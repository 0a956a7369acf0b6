"""Add entry draft and version tables"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '7c3e9a1d4b2f'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'entrydrafts',
        sa.Column('id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), autoincrement=True, nullable=False),
        sa.Column('entry_id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), nullable=False),
        sa.Column('section_id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), nullable=False),
        sa.Column('creator_id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), nullable=False),
        sa.Column('locale', sa.String(length=12), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('data', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_entrydrafts_entry_locale', 'entrydrafts', ['entry_id', 'locale'])
    op.create_index(op.f('ix_entrydrafts_section_id'), 'entrydrafts', ['section_id'])
    op.create_index(op.f('ix_entrydrafts_creator_id'), 'entrydrafts', ['creator_id'])

    op.create_table(
        'entryversions',
        sa.Column('id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), autoincrement=True, nullable=False),
        sa.Column('entry_id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), nullable=False),
        sa.Column('section_id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), nullable=False),
        sa.Column('creator_id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), nullable=True),
        sa.Column('locale', sa.String(length=12), nullable=False),
        sa.Column('num', sa.Integer(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('data', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_entryversions_entry_locale', 'entryversions', ['entry_id', 'locale'])
    op.create_index(op.f('ix_entryversions_section_id'), 'entryversions', ['section_id'])
    op.create_index(op.f('ix_entryversions_creator_id'), 'entryversions', ['creator_id'])


def downgrade():
    op.drop_index(op.f('ix_entryversions_creator_id'), table_name='entryversions')
    op.drop_index(op.f('ix_entryversions_section_id'), table_name='entryversions')
    op.drop_index('ix_entryversions_entry_locale', table_name='entryversions')
    op.drop_table('entryversions')
    op.drop_index(op.f('ix_entrydrafts_creator_id'), table_name='entrydrafts')
    op.drop_index(op.f('ix_entrydrafts_section_id'), table_name='entrydrafts')
    op.drop_index('ix_entrydrafts_entry_locale', table_name='entrydrafts')
    op.drop_table('entrydrafts')
