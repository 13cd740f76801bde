#!/usr/bin/env python3
"""
Script to seed the database with a sample review schedule
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import datetime, timedelta
from app.database import init_db, drop_db, get_db
from app.models import Assignment, SignUpTopic, Student, DeadlineType, DeadlineRight, seed_deadline_lookups
from app.services.deadline_scheduler import DeadlineScheduler


def create_assignments(db):
    """Create one plain and one staggered assignment with a topic and students"""
    plain = Assignment(name='Design Patterns Review', staggered_deadline=False)
    staggered = Assignment(name='Wiki Chapters', staggered_deadline=True)
    db.add_all([plain, staggered])
    db.flush()

    topic = SignUpTopic(assignment_id=staggered.id, topic_name='Chapter 3: Observers')
    db.add(topic)
    db.flush()

    db.add_all([
        Student(name='Student 1', assignment_id=plain.id),
        Student(name='Student 2', assignment_id=staggered.id, topic_id=topic.id),
    ])

    return {'plain': plain, 'staggered': staggered, 'topic': topic}


def create_schedules(scheduler, records):
    """Two review rounds for each assignment; the topic runs one round early"""
    now = datetime.utcnow()
    rounds = [
        (DeadlineType.SUBMISSION, now - timedelta(days=14)),
        (DeadlineType.REVIEW, now - timedelta(days=7)),
        (DeadlineType.SUBMISSION, now + timedelta(days=7)),
        (DeadlineType.REVIEW, now + timedelta(days=14)),
    ]

    count = 0
    for assignment in (records['plain'], records['staggered']):
        for deadline_type_id, due_at in rounds:
            scheduler.add_due_date(assignment, due_at, deadline_type_id)
            count += 1

    for deadline_type_id, due_at in rounds[:2]:
        scheduler.add_due_date(
            records['topic'], due_at - timedelta(days=3), deadline_type_id,
            teammate_review_allowed_id=DeadlineRight.NO
        )
        count += 1

    print(f"Created {count} due dates")


def main():
    """Main seeding function"""
    print("Dropping existing database...")
    drop_db()

    print("Initializing new database...")
    init_db()

    with get_db() as db:
        print("Creating deadline types and rights...")
        seed_deadline_lookups(db)

        print("Creating assignments...")
        records = create_assignments(db)

    print("Creating schedules...")
    create_schedules(DeadlineScheduler(), records)

    print("\nDatabase seeded successfully!")
    print(f"- Assignment {records['plain'].id}: {records['plain'].name}")
    print(f"- Assignment {records['staggered'].id}: {records['staggered'].name} "
          f"(staggered, topic {records['topic'].id})")


if __name__ == "__main__":
    main()
