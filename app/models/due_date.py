from sqlalchemy import Column, String, Integer, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from .base import BaseModel


class DueDate(BaseModel):
    """A deadline owned by an assignment or a topic.

    Both kinds live in one table; ``type`` tells which parent ``parent_id``
    refers to. Query through :class:`AssignmentDueDate` or
    :class:`TopicDueDate` to stay within one parent kind.
    """
    __tablename__ = 'due_dates'

    type = Column(String(32), nullable=False, index=True)
    parent_id = Column(Integer, nullable=False, index=True)

    due_at = Column(DateTime, nullable=False, index=True)
    deadline_type_id = Column(Integer, ForeignKey('deadline_types.id'))
    deadline_name = Column(String(255))
    description_url = Column(String(500))
    round = Column(Integer, default=1)

    # Rights (DeadlineRight ids)
    submission_allowed_id = Column(Integer, ForeignKey('deadline_rights.id'))
    review_allowed_id = Column(Integer, ForeignKey('deadline_rights.id'))
    review_of_review_allowed_id = Column(Integer, ForeignKey('deadline_rights.id'))
    teammate_review_allowed_id = Column(Integer, ForeignKey('deadline_rights.id'))
    quiz_allowed_id = Column(Integer, ForeignKey('deadline_rights.id'))

    deadline_type = relationship("DeadlineType", lazy='joined')

    __mapper_args__ = {
        'polymorphic_on': type,
        'polymorphic_identity': 'DueDate',
    }

    def __repr__(self):
        return (f"<{type(self).__name__}(id={self.id}, parent_id={self.parent_id}, "
                f"due_at={self.due_at}, deadline_type_id={self.deadline_type_id})>")


class AssignmentDueDate(DueDate):
    __mapper_args__ = {'polymorphic_identity': 'AssignmentDueDate'}


class TopicDueDate(DueDate):
    __mapper_args__ = {'polymorphic_identity': 'TopicDueDate'}
