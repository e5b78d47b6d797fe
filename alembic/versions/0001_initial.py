"""initial

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=50), nullable=True),
        sa.Column('last_name', sa.String(length=50), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_digest', sa.String(length=255), nullable=False),
        sa.Column('role', sa.Enum('user', 'admin', name='userrole'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'task_statuses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_task_statuses'),
        sa.UniqueConstraint('name', name='uq_task_statuses_name'),
    )
    op.create_index('ix_task_statuses_slug', 'task_statuses', ['slug'], unique=True)

    op.create_table(
        'labels',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=1000), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_labels'),
        sa.UniqueConstraint('name', name='uq_labels_name'),
    )

    op.create_table(
        'tasks',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('index', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('task_status_id', sa.Integer(), nullable=False),
        sa.Column('assignee_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ['task_status_id'], ['task_statuses.id'],
            name='fk_tasks_task_status_id_task_statuses',
        ),
        sa.ForeignKeyConstraint(
            ['assignee_id'], ['users.id'],
            name='fk_tasks_assignee_id_users',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_tasks'),
    )
    op.create_index('ix_tasks_task_status_id', 'tasks', ['task_status_id'])
    op.create_index('ix_tasks_assignee_id', 'tasks', ['assignee_id'])

    op.create_table(
        'task_labels',
        sa.Column('task_id', sa.Integer(), nullable=False),
        sa.Column('label_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ['task_id'], ['tasks.id'],
            name='fk_task_labels_task_id_tasks', ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['label_id'], ['labels.id'],
            name='fk_task_labels_label_id_labels',
        ),
        sa.PrimaryKeyConstraint('task_id', 'label_id', name='pk_task_labels'),
    )


def downgrade():
    op.drop_table('task_labels')
    op.drop_index('ix_tasks_assignee_id', table_name='tasks')
    op.drop_index('ix_tasks_task_status_id', table_name='tasks')
    op.drop_table('tasks')
    op.drop_table('labels')
    op.drop_index('ix_task_statuses_slug', table_name='task_statuses')
    op.drop_table('task_statuses')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
    sa.Enum(name='userrole').drop(op.get_bind(), checkfirst=True)
