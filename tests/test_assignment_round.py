import pytest
from datetime import timedelta
from app.database import DatabaseManager
from app.exceptions import NotFoundError
from app.models import (
    AssignmentDueDate, DeadlineType, FeedbackResponseMap, Response,
    ReviewResponseMap, TeammateReviewResponseMap
)


@pytest.fixture
def round_schedule(assignment, now):
    """Boundary deadlines at t1 and t3, a submission deadline at t2"""
    times = {
        't1': now - timedelta(days=20),
        't2': now - timedelta(days=10),
        't3': now + timedelta(days=10),
    }
    due_date_db = DatabaseManager(AssignmentDueDate)

    # Inserted out of order on purpose
    due_date_db.create(parent_id=assignment.id, due_at=times['t3'], deadline_type_id=DeadlineType.REVIEW)
    due_date_db.create(parent_id=assignment.id, due_at=times['t1'], deadline_type_id=DeadlineType.REVIEW)
    due_date_db.create(parent_id=assignment.id, due_at=times['t2'], deadline_type_id=DeadlineType.SUBMISSION)

    review_map = DatabaseManager(ReviewResponseMap).create(reviewed_object_id=assignment.id)

    def make_response(created_at, map_id=review_map.id):
        return DatabaseManager(Response).create(map_id=map_id, created_at=created_at)

    times['response'] = make_response
    return times


class TestCalculateAssignmentRound:
    """Test review round calculation"""

    def test_before_first_boundary(self, scheduler, assignment, round_schedule):
        response = round_schedule['response'](round_schedule['t1'] - timedelta(hours=1))
        assert scheduler.calculate_assignment_round(assignment.id, response) == 1

    def test_at_first_boundary(self, scheduler, assignment, round_schedule):
        """Test a response at exactly t1 counts the boundary as passed"""
        response = round_schedule['response'](round_schedule['t1'])
        assert scheduler.calculate_assignment_round(assignment.id, response) == 2

    def test_between_boundary_and_submission(self, scheduler, assignment, round_schedule):
        response = round_schedule['response'](round_schedule['t1'] + timedelta(days=1))
        assert scheduler.calculate_assignment_round(assignment.id, response) == 2

    def test_after_non_boundary_deadline(self, scheduler, assignment, round_schedule):
        """Test a passed submission deadline does not start a new round"""
        response = round_schedule['response'](round_schedule['t2'] + timedelta(days=1))
        assert scheduler.calculate_assignment_round(assignment.id, response) == 2

    def test_after_last_boundary(self, scheduler, assignment, round_schedule):
        response = round_schedule['response'](round_schedule['t3'] + timedelta(days=1))
        assert scheduler.calculate_assignment_round(assignment.id, response) == 3

    def test_non_review_responses_are_round_zero(self, scheduler, assignment, round_schedule):
        """Test only review responses are organized into rounds"""
        for map_class in (FeedbackResponseMap, TeammateReviewResponseMap):
            response_map = DatabaseManager(map_class).create(reviewed_object_id=assignment.id)
            response = round_schedule['response'](
                round_schedule['t3'] + timedelta(days=1), map_id=response_map.id
            )

            assert scheduler.calculate_assignment_round(assignment.id, response) == 0

    def test_no_due_dates(self, scheduler, assignment, now):
        """Test a review response with no schedule is in round 1"""
        review_map = DatabaseManager(ReviewResponseMap).create(reviewed_object_id=assignment.id)
        response = DatabaseManager(Response).create(map_id=review_map.id, created_at=now)

        assert scheduler.calculate_assignment_round(assignment.id, response) == 1

    def test_missing_response_map(self, scheduler, assignment, now):
        response = Response(map_id=9999, created_at=now)

        with pytest.raises(NotFoundError) as exc_info:
            scheduler.calculate_assignment_round(assignment.id, response)
        assert exc_info.value.entity == 'ResponseMap'
