"""create election tables

Revision ID: 3f9c1d2a7b64
Revises: 
Create Date: 2026-10-19 09:12:44.118305

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f9c1d2a7b64'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('admins',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('username', sa.String(length=80), nullable=False),
    sa.Column('password_hash', sa.String(length=255), nullable=False),
    sa.Column('role', sa.String(length=20), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('username')
    )
    op.create_table('participants',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('party_name', sa.String(length=200), nullable=False),
    sa.Column('party_name_nepali', sa.String(length=200), nullable=True),
    sa.Column('party_symbol', sa.String(length=200), nullable=True),
    sa.Column('party_logo', sa.String(length=500), nullable=True),
    sa.Column('description', sa.Text(), nullable=True),
    sa.Column('vote_count', sa.Integer(), nullable=False),
    sa.Column('direct_seats', sa.Integer(), nullable=False),
    sa.Column('proportional_seats', sa.Integer(), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('party_name')
    )
    op.create_table('voters',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('voter_id', sa.String(length=50), nullable=False),
    sa.Column('voter_name', sa.String(length=200), nullable=False),
    sa.Column('citizenship_number', sa.String(length=50), nullable=False),
    sa.Column('has_voted', sa.Boolean(), nullable=False),
    sa.Column('voted_for_party_id', sa.Integer(), nullable=True),
    sa.Column('voted_at', sa.DateTime(), nullable=True),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('citizenship_number'),
    sa.UniqueConstraint('voter_id')
    )
    op.create_table('party_members',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('participant_id', sa.Integer(), nullable=False),
    sa.Column('member_name', sa.String(length=200), nullable=False),
    sa.Column('member_name_nepali', sa.String(length=200), nullable=True),
    sa.Column('position', sa.String(length=200), nullable=False),
    sa.Column('position_nepali', sa.String(length=200), nullable=True),
    sa.Column('ward_number', sa.Integer(), nullable=True),
    sa.Column('type', sa.String(length=20), nullable=False),
    sa.Column('vote_count', sa.Integer(), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.ForeignKeyConstraint(['participant_id'], ['participants.id'], ),
    sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('party_members', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_party_members_participant_id'), ['participant_id'], unique=False)

    op.create_table('voter_candidate_votes',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('voter_id', sa.Integer(), nullable=False),
    sa.Column('member_id', sa.Integer(), nullable=False),
    sa.Column('position', sa.String(length=200), nullable=True),
    sa.Column('member_name', sa.String(length=200), nullable=True),
    sa.ForeignKeyConstraint(['voter_id'], ['voters.id'], ),
    sa.PrimaryKeyConstraint('id')
    )


def downgrade():
    op.drop_table('voter_candidate_votes')
    with op.batch_alter_table('party_members', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_party_members_participant_id'))

    op.drop_table('party_members')
    op.drop_table('voters')
    op.drop_table('participants')
    op.drop_table('admins')
