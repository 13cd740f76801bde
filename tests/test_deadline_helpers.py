import pytest
from datetime import datetime
from app.exceptions import ConfigurationMissingError
from app.models import AssignmentDueDate, DeadlineRight
from app.services.deadline_scheduler import DeadlineScheduler


def due_date(label, due_at):
    return AssignmentDueDate(parent_id=1, due_at=due_at, deadline_name=label)


class TestSortByDueAt:
    """Test due date ordering"""

    def test_sorts_ascending(self):
        """Test output is ordered by due_at"""
        due_dates = [
            due_date('c', datetime(2026, 3, 3)),
            due_date('a', datetime(2026, 3, 1)),
            due_date('b', datetime(2026, 3, 2)),
        ]

        result = DeadlineScheduler.sort_by_due_at(due_dates)

        assert [d.deadline_name for d in result] == ['a', 'b', 'c']
        assert sorted(result, key=id) == sorted(due_dates, key=id)

    def test_input_left_untouched(self):
        """Test sorting returns a new list"""
        due_dates = [due_date('b', datetime(2026, 3, 2)), due_date('a', datetime(2026, 3, 1))]

        DeadlineScheduler.sort_by_due_at(due_dates)

        assert [d.deadline_name for d in due_dates] == ['b', 'a']

    def test_same_second_keeps_input_order(self):
        """Test sub-second differences are ignored and ties stay stable"""
        due_dates = [
            due_date('late-fraction', datetime(2026, 3, 1, 10, 0, 0, 900000)),
            due_date('early', datetime(2026, 3, 1, 9, 0, 0)),
            due_date('early-fraction', datetime(2026, 3, 1, 10, 0, 0, 100000)),
        ]

        result = DeadlineScheduler.sort_by_due_at(due_dates)

        assert [d.deadline_name for d in result] == ['early', 'late-fraction', 'early-fraction']

    def test_empty(self):
        assert DeadlineScheduler.sort_by_due_at([]) == []


class TestDefaultPermission:
    """Test default permission lookups"""

    def test_known_pair(self):
        """Test lookup from the configured table"""
        scheduler = DeadlineScheduler()

        assert scheduler.default_permission('review', 'can_review') == DeadlineRight.OK
        assert scheduler.default_permission('review', 'submission_allowed') == DeadlineRight.NO
        assert scheduler.default_permission('metareview', 'review_of_review_allowed') == DeadlineRight.OK

    def test_missing_pair_raises(self):
        """Test a miss surfaces as a lookup failure"""
        scheduler = DeadlineScheduler()

        with pytest.raises(ConfigurationMissingError) as exc_info:
            scheduler.default_permission('review', 'quiz_allowed')
        assert exc_info.value.deadline_type == 'review'
        assert exc_info.value.permission_type == 'quiz_allowed'

        with pytest.raises(KeyError):
            scheduler.default_permission('no_such_deadline', 'can_review')

    def test_injected_table(self):
        """Test the scheduler uses the table it was given"""
        scheduler = DeadlineScheduler(default_permissions={'quiz': {'quiz_allowed': DeadlineRight.LATE}})

        assert scheduler.default_permission('quiz', 'quiz_allowed') == DeadlineRight.LATE
        with pytest.raises(ConfigurationMissingError):
            scheduler.default_permission('review', 'can_review')

    def test_default_table_is_read_only(self):
        """Test the configured table cannot be mutated"""
        scheduler = DeadlineScheduler()

        with pytest.raises(TypeError):
            scheduler.default_permissions['review'] = {}
        with pytest.raises(TypeError):
            scheduler.default_permissions['review']['can_review'] = DeadlineRight.NO
