import os
from types import MappingProxyType
from dotenv import load_dotenv

load_dotenv()


def _freeze(table):
    """Wrap a nested dict in read-only mapping proxies"""
    return MappingProxyType({
        key: _freeze(value) if isinstance(value, dict) else value
        for key, value in table.items()
    })


# Deadline right ids (see app.models.deadline.DeadlineRight)
_NO, _LATE, _OK = 1, 2, 3


class Config:
    DATABASE_URL = os.environ.get('DATABASE_URL') or 'sqlite:///deadlines.db'

    # Scheduling
    ROUND_BOUNDARY_DEADLINE_TYPE = int(os.environ.get('ROUND_BOUNDARY_DEADLINE_TYPE', '2'))

    # Default rights per deadline type name, keyed by permission name
    DEFAULT_PERMISSION = _freeze({
        'signup': {
            'submission_allowed': _OK,
            'can_review': _NO,
            'review_of_review_allowed': _NO,
        },
        'team_formation': {
            'submission_allowed': _OK,
            'can_review': _NO,
            'review_of_review_allowed': _NO,
        },
        'submission': {
            'submission_allowed': _OK,
            'can_review': _NO,
            'review_of_review_allowed': _NO,
        },
        'review': {
            'submission_allowed': _NO,
            'can_review': _OK,
            'review_of_review_allowed': _NO,
        },
        'metareview': {
            'submission_allowed': _NO,
            'can_review': _NO,
            'review_of_review_allowed': _OK,
        },
        'drop_topic': {
            'submission_allowed': _OK,
            'can_review': _NO,
            'review_of_review_allowed': _NO,
        },
    })

    # Logging
    LOG_FILE = os.environ.get('LOG_FILE', 'logs/deadlines.log')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
