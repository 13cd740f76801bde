from sqlalchemy import Column, String, Integer, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from .base import BaseModel


class Assignment(BaseModel):
    __tablename__ = 'assignments'

    name = Column(String(255), nullable=False)

    # Topics follow their own schedules before falling back to the assignment's
    staggered_deadline = Column(Boolean, default=False, nullable=False)

    # Relationships
    topics = relationship("SignUpTopic", back_populates="assignment")
    students = relationship("Student", back_populates="assignment")
    due_dates = relationship(
        "AssignmentDueDate",
        primaryjoin="Assignment.id == foreign(AssignmentDueDate.parent_id)",
        order_by="AssignmentDueDate.due_at",
        viewonly=True
    )

    def staggered_deadline_enabled(self):
        return bool(self.staggered_deadline)


class SignUpTopic(BaseModel):
    __tablename__ = 'sign_up_topics'

    assignment_id = Column(Integer, ForeignKey('assignments.id'), nullable=False)
    topic_name = Column(String(255), nullable=False)

    # Relationships
    assignment = relationship("Assignment", back_populates="topics")
    due_dates = relationship(
        "TopicDueDate",
        primaryjoin="SignUpTopic.id == foreign(TopicDueDate.parent_id)",
        order_by="TopicDueDate.due_at",
        viewonly=True
    )
