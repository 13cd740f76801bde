from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship
from .base import BaseModel


class Student(BaseModel):
    """A participant of one assignment, optionally signed up for a topic"""
    __tablename__ = 'students'

    name = Column(String(255), nullable=False)
    assignment_id = Column(Integer, ForeignKey('assignments.id'), nullable=False)
    topic_id = Column(Integer, ForeignKey('sign_up_topics.id'))

    # Relationships
    assignment = relationship("Assignment", back_populates="students")
    topic = relationship("SignUpTopic")
