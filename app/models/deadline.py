from sqlalchemy import Column, String
from .base import BaseModel


class DeadlineType(BaseModel):
    """Kind of deadline: submission, review, metareview..."""
    __tablename__ = 'deadline_types'

    SUBMISSION = 1
    REVIEW = 2
    METAREVIEW = 5
    DROP_TOPIC = 6
    SIGNUP = 7
    TEAM_FORMATION = 8

    NAMES = {
        SUBMISSION: 'submission',
        REVIEW: 'review',
        METAREVIEW: 'metareview',
        DROP_TOPIC: 'drop_topic',
        SIGNUP: 'signup',
        TEAM_FORMATION: 'team_formation',
    }

    name = Column(String(32), nullable=False, unique=True)

    def __repr__(self):
        return f"<DeadlineType(id={self.id}, name={self.name})>"


class DeadlineRight(BaseModel):
    """Permission value attached to a deadline for a given action"""
    __tablename__ = 'deadline_rights'

    NO = 1
    LATE = 2
    OK = 3

    NAMES = {NO: 'No', LATE: 'Late', OK: 'OK'}

    # Rights under which an action is still permitted
    ALLOWED = frozenset([LATE, OK])

    name = Column(String(32), nullable=False, unique=True)

    def __repr__(self):
        return f"<DeadlineRight(id={self.id}, name={self.name})>"


def seed_deadline_lookups(db):
    """Insert the well-known deadline types and rights if missing"""
    for model_class in (DeadlineType, DeadlineRight):
        for lookup_id, name in model_class.NAMES.items():
            if db.get(model_class, lookup_id) is None:
                db.add(model_class(id=lookup_id, name=name))
    db.flush()
