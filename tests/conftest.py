import os

# Must be set before config.config is imported
os.environ.setdefault('DATABASE_URL', 'sqlite:///test_deadlines.db')
os.environ.setdefault('LOG_FILE', 'logs/test_deadlines.log')

import pytest
from datetime import datetime
from app.database import drop_db, init_db, get_db, DatabaseManager
from app.models import Assignment, SignUpTopic, seed_deadline_lookups
from app.services.deadline_scheduler import DeadlineScheduler


@pytest.fixture
def now():
    return datetime(2026, 3, 1, 12, 0, 0)


@pytest.fixture
def database():
    """Fresh database with deadline types and rights"""
    init_db()
    with get_db() as db:
        seed_deadline_lookups(db)
    yield
    drop_db()


@pytest.fixture
def scheduler(now):
    """Scheduler whose clock is frozen"""
    return DeadlineScheduler(clock=lambda: now)


@pytest.fixture
def assignment(database):
    return DatabaseManager(Assignment).create(name='Assignment 1', staggered_deadline=False)


@pytest.fixture
def staggered_assignment(database):
    return DatabaseManager(Assignment).create(name='Staggered Assignment', staggered_deadline=True)


@pytest.fixture
def topic(staggered_assignment):
    return DatabaseManager(SignUpTopic).create(
        assignment_id=staggered_assignment.id,
        topic_name='Topic 1'
    )
