from datetime import datetime
from typing import Callable, Dict, Iterable, List, Mapping, Optional
from sqlalchemy import inspect
from app.database import get_db
from app.exceptions import ConfigurationMissingError, DueDateCopyError, NotFoundError
from app.models import (
    Assignment, AssignmentDueDate, DeadlineRight, DeadlineType, DueDate,
    ResponseMap, SignUpTopic, Student, TopicDueDate
)
from app.utils.clock import to_timestamp, utcnow
from app.utils.logger import get_logger
from config.config import Config

logger = get_logger(__name__)

FINISHED = 'Finished'
REVIEW_RESPONSE_MAP = 'ReviewResponseMap'

# Columns a copied due date must not inherit
_COPY_EXCLUDED = frozenset(['id', 'parent_id', 'created_at', 'updated_at'])

# Rights filled by add_due_date, keyed by their name in the permission table
_RIGHT_COLUMNS = {
    'submission_allowed': 'submission_allowed_id',
    'can_review': 'review_allowed_id',
    'review_of_review_allowed': 'review_of_review_allowed_id',
}


class DeadlineScheduler:
    """Deadline facts for the review workflow: rounds, rights and next due dates.

    The session scope, clock and default permission table are injected so
    that callers (and tests) can swap any of them.
    """

    def __init__(
        self,
        session_scope=get_db,
        clock: Callable[[], datetime] = utcnow,
        default_permissions: Optional[Mapping] = None,
        round_boundary_type: int = Config.ROUND_BOUNDARY_DEADLINE_TYPE,
    ):
        self.session_scope = session_scope
        self.clock = clock
        self.default_permissions = (
            default_permissions if default_permissions is not None else Config.DEFAULT_PERMISSION
        )
        self.round_boundary_type = round_boundary_type

    @staticmethod
    def sort_by_due_at(due_dates: Iterable[DueDate]) -> List[DueDate]:
        """Sort due dates by whole-second due_at, keeping input order on ties"""
        return sorted(due_dates, key=lambda due_date: to_timestamp(due_date.due_at))

    def default_permission(self, deadline_type: str, permission_type: str) -> int:
        """Default right for an action under a deadline type"""
        try:
            return self.default_permissions[deadline_type][permission_type]
        except KeyError:
            raise ConfigurationMissingError(deadline_type, permission_type) from None

    def calculate_assignment_round(self, assignment_id: int, response) -> int:
        """Review round a response belongs to; 0 for non-review responses"""
        with self.session_scope() as db:
            response_map = db.get(ResponseMap, response.map_id)
            if response_map is None:
                raise NotFoundError('ResponseMap', response.map_id)
            if response_map.type != REVIEW_RESPONSE_MAP:
                return 0

            due_dates = self._assignment_due_dates(db, assignment_id)

        return self._determine_assignment_round(response, self.sort_by_due_at(due_dates))

    def _determine_assignment_round(self, response, sorted_due_dates: List[DueDate]) -> int:
        round_number = 1
        for due_date in sorted_due_dates:
            if response.created_at < due_date.due_at:
                break
            if due_date.deadline_type_id == self.round_boundary_type:
                round_number += 1
        return round_number

    def find_current_due_date(self, due_dates: Iterable[DueDate]) -> Optional[DueDate]:
        """First due date strictly in the future, in the order given"""
        now = self.clock()
        return next((due_date for due_date in due_dates if due_date.due_at > now), None)

    def teammate_review_allowed(self, student) -> bool:
        """Whether the student may review teammates right now"""
        with self.session_scope() as db:
            participant = db.get(Student, student.id)
            if participant is None:
                raise NotFoundError('Student', student.id)
            assignment = participant.assignment
            assignment_id = assignment.id
            due_date = self.find_current_due_date(self.sort_by_due_at(assignment.due_dates))

        if self.current_stage(assignment_id) == FINISHED:
            return True
        return due_date is not None and due_date.teammate_review_allowed_id in DeadlineRight.ALLOWED

    def current_stage(self, assignment_id: int, topic_id: Optional[int] = None) -> str:
        """Name of the upcoming deadline type, or 'Finished' once none is left"""
        return self._stage_name(self.get_next_due_date(assignment_id, topic_id))

    @staticmethod
    def _stage_name(next_due_date: Optional[DueDate]) -> str:
        if next_due_date is None:
            return FINISHED
        if next_due_date.deadline_type is not None:
            return next_due_date.deadline_type.name
        return DeadlineType.NAMES.get(next_due_date.deadline_type_id, str(next_due_date.deadline_type_id))

    def copy(self, old_assignment_id: int, new_assignment_id: int) -> List[AssignmentDueDate]:
        """Duplicate an assignment's schedule onto another assignment, all or nothing"""
        due_date_id = None
        try:
            with self.session_scope() as db:
                copies = []
                for orig_due_date in self._assignment_due_dates(db, old_assignment_id):
                    due_date_id = orig_due_date.id
                    new_due_date = self._duplicate_due_date(orig_due_date, new_assignment_id)
                    db.add(new_due_date)
                    db.flush()
                    copies.append(new_due_date)
        except Exception as e:
            logger.error(
                f"Error copying due dates from assignment {old_assignment_id} "
                f"to {new_assignment_id}: {str(e)}"
            )
            raise DueDateCopyError(old_assignment_id, new_assignment_id, due_date_id) from e

        logger.info(
            f"Copied {len(copies)} due dates from assignment {old_assignment_id} to {new_assignment_id}"
        )
        return copies

    @staticmethod
    def _duplicate_due_date(orig_due_date: DueDate, new_assignment_id: int) -> DueDate:
        fields = {
            attr.key: getattr(orig_due_date, attr.key)
            for attr in inspect(type(orig_due_date)).column_attrs
            if attr.key not in _COPY_EXCLUDED
        }
        return type(orig_due_date)(parent_id=new_assignment_id, **fields)

    def get_next_due_date(self, assignment_id: int, topic_id: Optional[int] = None) -> Optional[DueDate]:
        """Next due date of an assignment, following the topic's schedule when staggered"""
        with self.session_scope() as db:
            assignment = db.get(Assignment, assignment_id)
            if assignment is None:
                raise NotFoundError('Assignment', assignment_id)
            staggered = assignment.staggered_deadline_enabled()

        if staggered:
            return self.find_next_topic_due_date(assignment_id, topic_id)

        with self.session_scope() as db:
            return (
                db.query(AssignmentDueDate)
                .filter(
                    AssignmentDueDate.parent_id == assignment_id,
                    AssignmentDueDate.due_at >= self.clock()
                )
                .order_by(AssignmentDueDate.due_at, AssignmentDueDate.id)
                .first()
            )

    def find_next_topic_due_date(self, assignment_id: int, topic_id: Optional[int]) -> Optional[DueDate]:
        """Next due date for a topic of a staggered assignment.

        Once all of a topic's own deadlines have passed, the topic continues
        on the assignment's schedule at the position after them, e.g. with
        three past topic deadlines the candidates start at the fourth
        assignment deadline rather than the first.
        """
        now = self.clock()
        with self.session_scope() as db:
            next_due_date = (
                db.query(TopicDueDate)
                .filter(TopicDueDate.parent_id == topic_id, TopicDueDate.due_at >= now)
                .order_by(TopicDueDate.due_at, TopicDueDate.id)
                .first()
            )
            if next_due_date is not None:
                return next_due_date

            topic_due_date_count = db.query(TopicDueDate).filter(TopicDueDate.parent_id == topic_id).count()
            assignment_due_dates = self.sort_by_due_at(self._assignment_due_dates(db, assignment_id))

        following_due_dates = assignment_due_dates[topic_due_date_count:]

        return next((due_date for due_date in following_due_dates if due_date.due_at >= now), None)

    def add_due_date(self, parent, due_at: datetime, deadline_type_id: int, **fields) -> DueDate:
        """Schedule a deadline for an assignment or a topic.

        Rights not given explicitly come from the default permission table
        for the deadline type; teammate review and quizzes default to OK.
        """
        if isinstance(parent, Assignment):
            model_class = AssignmentDueDate
        elif isinstance(parent, SignUpTopic):
            model_class = TopicDueDate
        else:
            raise TypeError(f"Cannot schedule a due date for {type(parent).__name__}")

        deadline_name = DeadlineType.NAMES.get(deadline_type_id)
        for permission_type, column in _RIGHT_COLUMNS.items():
            if column in fields:
                continue
            if deadline_name in self.default_permissions:
                fields[column] = self.default_permission(deadline_name, permission_type)
            else:
                fields[column] = DeadlineRight.OK
        fields.setdefault('teammate_review_allowed_id', DeadlineRight.OK)
        fields.setdefault('quiz_allowed_id', DeadlineRight.OK)

        with self.session_scope() as db:
            due_date = model_class(
                parent_id=parent.id,
                due_at=due_at,
                deadline_type_id=deadline_type_id,
                **fields
            )
            db.add(due_date)
            db.flush()

        logger.info(f"Scheduled {model_class.__name__} {due_date.id} for {type(parent).__name__} {parent.id}")
        return due_date

    @staticmethod
    def _assignment_due_dates(db, assignment_id: int) -> List[AssignmentDueDate]:
        """An assignment's due dates in insertion order"""
        return (
            db.query(AssignmentDueDate)
            .filter(AssignmentDueDate.parent_id == assignment_id)
            .order_by(AssignmentDueDate.id)
            .all()
        )

    def schedule_summary(self, assignment_id: int, topic_id: Optional[int] = None) -> Dict:
        """Next due date and stage of an assignment as a plain dict"""
        next_due_date = self.get_next_due_date(assignment_id, topic_id)
        return {
            'assignment_id': assignment_id,
            'topic_id': topic_id,
            'stage': self._stage_name(next_due_date),
            'next_due_date': {
                'id': next_due_date.id,
                'type': next_due_date.type,
                'due_at': next_due_date.due_at.isoformat(),
                'deadline_type_id': next_due_date.deadline_type_id,
            } if next_due_date else None
        }
