from sqlalchemy import Column, String, Integer, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from .base import BaseModel


class ResponseMap(BaseModel):
    """Links a reviewer to what they review; ``type`` says what kind of review"""
    __tablename__ = 'response_maps'

    type = Column(String(64), nullable=False, index=True)
    reviewed_object_id = Column(Integer, index=True)
    reviewer_id = Column(Integer)
    reviewee_id = Column(Integer)

    responses = relationship("Response", back_populates="response_map")

    __mapper_args__ = {
        'polymorphic_on': type,
        'polymorphic_identity': 'ResponseMap',
    }


class ReviewResponseMap(ResponseMap):
    __mapper_args__ = {'polymorphic_identity': 'ReviewResponseMap'}


class TeammateReviewResponseMap(ResponseMap):
    __mapper_args__ = {'polymorphic_identity': 'TeammateReviewResponseMap'}


class FeedbackResponseMap(ResponseMap):
    __mapper_args__ = {'polymorphic_identity': 'FeedbackResponseMap'}


class Response(BaseModel):
    __tablename__ = 'responses'

    map_id = Column(Integer, ForeignKey('response_maps.id'), nullable=False)
    round = Column(Integer)
    is_submitted = Column(Boolean, default=False)

    response_map = relationship("ResponseMap", back_populates="responses")
