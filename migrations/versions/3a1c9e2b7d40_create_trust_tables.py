"""create trust tables

Revision ID: 3a1c9e2b7d40
Revises: 
Create Date: 2026-01-04 19:02:41.118204

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3a1c9e2b7d40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('quarterbacks',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('name', sa.String(length=200), nullable=False),
    sa.Column('team', sa.String(length=200), nullable=False),
    sa.Column('espn_id', sa.String(length=50), nullable=False),
    sa.Column('trust_score', sa.Float(), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('espn_id')
    )
    op.create_table('votes',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('qb_id', sa.Integer(), nullable=False),
    sa.Column('direction', sa.String(length=10), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.ForeignKeyConstraint(['qb_id'], ['quarterbacks.id'], ),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_votes_qb_id', 'votes', ['qb_id'], unique=False)
    op.create_index('ix_votes_created_at', 'votes', ['created_at'], unique=False)
    op.create_table('trust_snapshots',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('qb_id', sa.Integer(), nullable=False),
    sa.Column('score', sa.Float(), nullable=False),
    sa.Column('snapshot_date', sa.Date(), nullable=False),
    sa.ForeignKeyConstraint(['qb_id'], ['quarterbacks.id'], ),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('qb_id', 'snapshot_date', name='uq_trust_snapshot_qb_date')
    )
    op.create_index('ix_trust_snapshots_qb_id', 'trust_snapshots', ['qb_id'], unique=False)
    op.create_index('ix_trust_snapshots_snapshot_date', 'trust_snapshots', ['snapshot_date'], unique=False)


def downgrade():
    op.drop_index('ix_trust_snapshots_snapshot_date', table_name='trust_snapshots')
    op.drop_index('ix_trust_snapshots_qb_id', table_name='trust_snapshots')
    op.drop_table('trust_snapshots')
    op.drop_index('ix_votes_created_at', table_name='votes')
    op.drop_index('ix_votes_qb_id', table_name='votes')
    op.drop_table('votes')
    op.drop_table('quarterbacks')
