from .deadline import DeadlineType, DeadlineRight, seed_deadline_lookups
from .due_date import DueDate, AssignmentDueDate, TopicDueDate
from .assignment import Assignment, SignUpTopic
from .student import Student
from .response import (
    ResponseMap, ReviewResponseMap, TeammateReviewResponseMap,
    FeedbackResponseMap, Response
)

__all__ = [
    'DeadlineType', 'DeadlineRight', 'seed_deadline_lookups',
    'DueDate', 'AssignmentDueDate', 'TopicDueDate',
    'Assignment', 'SignUpTopic', 'Student',
    'ResponseMap', 'ReviewResponseMap', 'TeammateReviewResponseMap',
    'FeedbackResponseMap', 'Response'
]
