"""City model."""

from sqlalchemy import Column, Integer, String, Index
from app.database import Base
from app.models.base import TimestampMixin


class City(TimestampMixin, Base):
    """City that facilities are located in."""

    __tablename__ = "cities"

    name = Column(String(150), nullable=False)
    population = Column(Integer, nullable=True)
    image_url = Column(String(500), nullable=True)
    timezone = Column(String(64), nullable=True)  # IANA name, e.g. "America/Chicago"

    __table_args__ = (
        Index("idx_cities_name", "name"),
    )

    def __repr__(self):
        return f"<City {self.name}>"
