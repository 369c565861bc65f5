"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

USER_ROLES = ('ADMIN', 'MANAGER', 'USER')
CASE_STATUSES = ('OPEN', 'IN_PROGRESS', 'PENDING', 'CLOSED', 'ARCHIVED')
DOCUMENT_TYPES = ('CONTRACT', 'INVOICE', 'REPORT', 'LEGAL', 'FINANCIAL', 'IMAGE', 'VIDEO', 'OTHER')
CREDIT_TRANSACTION_TYPES = ('PURCHASE', 'USAGE')


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """
    Create the multi-tenant schema.

    Creates:
    - companies (tenants)
    - users, cases, documents, projects, analytics (tenant-scoped)
    - contract_opportunities (global)
    - credits, credit_transactions
    """
    # 1. Tenants
    op.create_table(
        'companies',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=100), nullable=False),
        sa.Column('domain', sa.String(length=255), nullable=True),
        sa.Column('logo', sa.String(length=500), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('industry', sa.String(length=100), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_index('ix_companies_slug', 'companies', ['slug'], unique=True)
    op.create_index('ix_companies_created_at', 'companies', ['created_at'])

    # 2. Users
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('salt', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('role', sa.Enum(*USER_ROLES, name='userrole', native_enum=False), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['tenant_id'], ['companies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_tenant_id', 'users', ['tenant_id'])
    op.create_index('ix_users_created_at', 'users', ['created_at'])

    # 3. Cases
    op.create_table(
        'cases',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('case_number', sa.String(length=64), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.Enum(*CASE_STATUSES, name='casestatus', native_enum=False), nullable=False),
        sa.Column('priority', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('currency', sa.String(length=3), nullable=False),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('assigned_to_id', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('priority BETWEEN 1 AND 5', name='ck_cases_priority_range'),
        sa.ForeignKeyConstraint(['tenant_id'], ['companies.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['assigned_to_id'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('case_number'),
    )
    op.create_index('ix_cases_tenant_id', 'cases', ['tenant_id'])
    op.create_index('ix_cases_assigned_to_id', 'cases', ['assigned_to_id'])
    op.create_index('ix_cases_created_at', 'cases', ['created_at'])
    op.create_index('ix_cases_tenant_status', 'cases', ['tenant_id', 'status'])

    # 4. Documents
    op.create_table(
        'documents',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('type', sa.Enum(*DOCUMENT_TYPES, name='documenttype', native_enum=False), nullable=False),
        sa.Column('filename', sa.String(length=255), nullable=False),
        sa.Column('filepath', sa.String(length=500), nullable=False),
        sa.Column('filesize', sa.BigInteger(), nullable=False),
        sa.Column('mime_type', sa.String(length=100), nullable=False),
        sa.Column('url', sa.String(length=500), nullable=True),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('uploaded_by_id', sa.Integer(), nullable=False),
        sa.Column('case_id', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['tenant_id'], ['companies.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['uploaded_by_id'], ['users.id']),
        sa.ForeignKeyConstraint(['case_id'], ['cases.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_documents_tenant_id', 'documents', ['tenant_id'])
    op.create_index('ix_documents_uploaded_by_id', 'documents', ['uploaded_by_id'])
    op.create_index('ix_documents_case_id', 'documents', ['case_id'])
    op.create_index('ix_documents_created_at', 'documents', ['created_at'])

    # 5. Projects
    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('budget', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('currency', sa.String(length=3), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('metadata', sa.JSON(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['tenant_id'], ['companies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_projects_status', 'projects', ['status'])
    op.create_index('ix_projects_tenant_id', 'projects', ['tenant_id'])
    op.create_index('ix_projects_created_at', 'projects', ['created_at'])

    # 6. Analytics
    op.create_table(
        'analytics',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('metric_name', sa.String(length=100), nullable=False),
        sa.Column('metric_value', sa.Numeric(precision=18, scale=4), nullable=False),
        sa.Column('period', sa.String(length=20), nullable=False),
        sa.Column('recorded_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('metadata', sa.JSON(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['tenant_id'], ['companies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_analytics_tenant_id', 'analytics', ['tenant_id'])
    op.create_index('ix_analytics_created_at', 'analytics', ['created_at'])
    op.create_index(
        'ix_analytics_tenant_metric_period', 'analytics', ['tenant_id', 'metric_name', 'period']
    )

    # 7. Contract opportunities (global)
    op.create_table(
        'contract_opportunities',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('solicitation', sa.String(length=100), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('agency', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('posted_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('response_deadline', sa.DateTime(timezone=True), nullable=False),
        sa.Column('set_value', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('place_of_performance', sa.String(length=255), nullable=True),
        sa.Column('naics_code', sa.String(length=20), nullable=True),
        sa.Column('psc_code', sa.String(length=20), nullable=True),
        sa.Column('contact_info', sa.String(length=255), nullable=True),
        sa.Column('url', sa.String(length=500), nullable=True),
        sa.Column('ai_score', sa.Float(), nullable=False),
        sa.Column('ai_summary', sa.Text(), nullable=True),
        sa.Column('metadata', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('solicitation'),
    )
    op.create_index('ix_contract_opportunities_agency', 'contract_opportunities', ['agency'])
    op.create_index('ix_contract_opportunities_ai_score', 'contract_opportunities', ['ai_score'])
    op.create_index('ix_contract_opportunities_created_at', 'contract_opportunities', ['created_at'])

    # 8. Credits
    op.create_table(
        'credits',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('balance', sa.Integer(), nullable=False),
        sa.Column('total_purchased', sa.Integer(), nullable=False),
        sa.Column('total_used', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('balance >= 0', name='ck_credits_balance_non_negative'),
        sa.CheckConstraint(
            'balance = total_purchased - total_used', name='ck_credits_balance_consistent'
        ),
        sa.ForeignKeyConstraint(['tenant_id'], ['companies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('tenant_id'),
    )
    op.create_index('ix_credits_created_at', 'credits', ['created_at'])

    op.create_table(
        'credit_transactions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column(
            'type',
            sa.Enum(*CREDIT_TRANSACTION_TYPES, name='credittransactiontype', native_enum=False),
            nullable=False,
        ),
        sa.Column('amount', sa.Integer(), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('balance_after', sa.Integer(), nullable=False),
        sa.Column('credit_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['credit_id'], ['credits.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_credit_transactions_credit_id', 'credit_transactions', ['credit_id'])
    op.create_index('ix_credit_transactions_created_at', 'credit_transactions', ['created_at'])


def downgrade() -> None:
    """Drop every table in reverse dependency order."""
    op.drop_table('credit_transactions')
    op.drop_table('credits')
    op.drop_table('contract_opportunities')
    op.drop_table('analytics')
    op.drop_table('projects')
    op.drop_table('documents')
    op.drop_table('cases')
    op.drop_table('users')
    op.drop_table('companies')
