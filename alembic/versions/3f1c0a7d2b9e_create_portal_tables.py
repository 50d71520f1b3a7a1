"""create users, countries, projects, notifications and settings tables

Revision ID: 3f1c0a7d2b9e
Revises:
Create Date: 2026-10-19 09:12:41.204118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '3f1c0a7d2b9e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the portal schema."""

    op.create_table('users',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=50), nullable=False, server_default='public'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_id', 'users', ['id'], unique=False)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'], unique=False)

    op.create_table('countries',
        sa.Column('id', sa.String(length=8), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('capital', sa.String(length=255), nullable=False),
        sa.Column('population', sa.BigInteger(), nullable=False),
        sa.Column('area', sa.Integer(), nullable=False),
        sa.Column('region', sa.String(length=20), nullable=False),
        sa.Column('gdp', sa.Integer(), nullable=True),
        sa.Column('languages', sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_countries_name', 'countries', ['name'], unique=True)
    op.create_index('ix_countries_region', 'countries', ['region'], unique=False)

    op.create_table('projects',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('submitted_by', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('project_title', sa.String(length=500), nullable=False),
        sa.Column('project_summary', sa.Text(), nullable=False),
        sa.Column('country', sa.String(length=255), nullable=False),
        sa.Column('region', sa.String(length=50), nullable=False),
        sa.Column('implementing_entity', sa.String(length=500), nullable=False),
        sa.Column('ppp_model', sa.String(length=255), nullable=True),
        sa.Column('project_type', sa.String(length=255), nullable=False),
        sa.Column('project_website', sa.String(length=500), nullable=True),
        sa.Column('contact_person', sa.String(length=255), nullable=False),
        sa.Column('contact_details', sa.String(length=500), nullable=False),
        sa.Column('project_description', sa.Text(), nullable=False),
        sa.Column('pifah_pillar', sa.String(length=100), nullable=False),
        sa.Column('alignment_to_national_priorities', sa.Text(), nullable=True),
        sa.Column('regional_integration_potential', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('regional_integration_details', sa.Text(), nullable=True),
        sa.Column('market_size', sa.Text(), nullable=True),
        sa.Column('target_population', sa.Text(), nullable=True),
        sa.Column('existing_solutions', sa.Text(), nullable=True),
        sa.Column('unique_selling_proposition', sa.Text(), nullable=True),
        sa.Column('expected_health_outcomes', sa.Text(), nullable=True),
        sa.Column('economic_benefits', sa.Text(), nullable=True),
        sa.Column('social_impact', sa.Text(), nullable=True),
        sa.Column('contribution_areas', sa.JSON(), nullable=False),
        sa.Column('contribution_description', sa.Text(), nullable=True),
        sa.Column('environmental_considerations', sa.Text(), nullable=True),
        sa.Column('estimated_investment', sa.String(length=255), nullable=True),
        sa.Column('cost_breakdown', sa.Text(), nullable=True),
        sa.Column('current_funding_model', sa.Text(), nullable=True),
        sa.Column('proposed_financing_structure', sa.Text(), nullable=True),
        sa.Column('expected_return', sa.Text(), nullable=True),
        sa.Column('current_stage', sa.String(length=50), nullable=False),
        sa.Column('key_milestones', sa.Text(), nullable=True),
        sa.Column('government_approvals', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('partnerships', sa.Text(), nullable=True),
        sa.Column('regulatory_alignment', sa.Text(), nullable=True),
        sa.Column('major_risks', sa.Text(), nullable=True),
        sa.Column('mitigation_measures', sa.Text(), nullable=True),
        sa.Column('planned_start_date', sa.String(length=50), nullable=True),
        sa.Column('implementation_horizon', sa.String(length=255), nullable=True),
        sa.Column('support_required', sa.JSON(), nullable=False),
        sa.Column('other_notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=False, server_default='pending'),
        sa.Column('reviewed_by', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('reviewed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('approved_by', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('approved_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['submitted_by'], ['users.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['reviewed_by'], ['users.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['approved_by'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            "status IN ('pending', 'under_review', 'approved', 'rejected')",
            name='ck_projects_status',
        ),
        comment='Investment proposals moving through review and approval'
    )
    op.create_index('ix_projects_id', 'projects', ['id'], unique=False)
    op.create_index('ix_projects_submitted_by', 'projects', ['submitted_by'], unique=False)
    op.create_index('ix_projects_country', 'projects', ['country'], unique=False)
    op.create_index('ix_projects_pifah_pillar', 'projects', ['pifah_pillar'], unique=False)
    op.create_index('ix_projects_status', 'projects', ['status'], unique=False)

    op.create_table('notifications',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('project_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_notifications_id', 'notifications', ['id'], unique=False)
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'], unique=False)
    op.create_index('ix_notifications_project_id', 'notifications', ['project_id'], unique=False)
    # Inbox queries filter on (user_id, read)
    op.create_index('ix_notifications_user_id_read', 'notifications', ['user_id', 'read'], unique=False)

    op.create_table('region_colors',
        sa.Column('region', sa.String(length=20), nullable=False),
        sa.Column('color', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('region'),
    )

    op.create_table('app_settings',
        sa.Column('id', sa.String(length=50), nullable=False),
        sa.Column('logo_url', sa.Text(), nullable=True),
        sa.Column('banner_image_url', sa.Text(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    """Drop the portal schema."""
    op.drop_table('app_settings')
    op.drop_table('region_colors')
    op.drop_index('ix_notifications_user_id_read', table_name='notifications')
    op.drop_index('ix_notifications_project_id', table_name='notifications')
    op.drop_index('ix_notifications_user_id', table_name='notifications')
    op.drop_index('ix_notifications_id', table_name='notifications')
    op.drop_table('notifications')
    op.drop_index('ix_projects_status', table_name='projects')
    op.drop_index('ix_projects_pifah_pillar', table_name='projects')
    op.drop_index('ix_projects_country', table_name='projects')
    op.drop_index('ix_projects_submitted_by', table_name='projects')
    op.drop_index('ix_projects_id', table_name='projects')
    op.drop_table('projects')
    op.drop_index('ix_countries_region', table_name='countries')
    op.drop_index('ix_countries_name', table_name='countries')
    op.drop_table('countries')
    op.drop_index('ix_users_role', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
