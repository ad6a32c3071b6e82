"""Review model."""

from sqlalchemy import Column, Float, ForeignKey, Index, String, Text
from app.database import Base
from app.models.base import ID_TYPE, TimestampMixin


class Review(TimestampMixin, Base):
    """Rating left on any entity, addressed by (entity_type, entity_id)."""

    __tablename__ = "reviews"

    entity_type = Column(String(50), nullable=False)  # "facility", "doctor", ...
    entity_id = Column(ID_TYPE, nullable=False)
    user_id = Column(ID_TYPE, ForeignKey("users.id"), nullable=True)
    rating = Column(Float, nullable=False)
    comment = Column(Text, nullable=True)

    __table_args__ = (
        Index("idx_reviews_target", "entity_type", "entity_id"),
    )
