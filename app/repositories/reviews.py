"""Review repository."""

from typing import List, Tuple

from sqlalchemy import func, select

from app.models.review import Review
from app.repositories.base import SQLRepository


class ReviewRepository(SQLRepository[Review]):
    model = Review
    writable_fields = ("entity_type", "entity_id", "user_id", "rating", "comment")

    def for_entity(self, entity_type: str, entity_id: int) -> List[Review]:
        """Reviews of one target, newest first."""
        stmt = (
            select(self.table)
            .where(self.table.c.entity_type == entity_type, self.table.c.entity_id == entity_id)
            .order_by(self.table.c.created_at.desc(), self.table.c.id.desc())
        )
        return self._fetch_all(stmt, "FindByEntity")

    def rating_summary(self, entity_type: str, entity_id: int) -> Tuple[float, int]:
        """Average rating and review count for one target. Average is 0.0 with no reviews."""
        stmt = select(func.avg(self.table.c.rating), func.count(self.table.c.id)).where(
            self.table.c.entity_type == entity_type,
            self.table.c.entity_id == entity_id,
        )
        with self._operation("RatingSummary"):
            average, count = self.db.execute(stmt).one()
        return float(average or 0.0), count
