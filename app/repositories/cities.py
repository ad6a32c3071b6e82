"""City repository."""

from app.models.city import City
from app.repositories.base import SQLRepository


class CityRepository(SQLRepository[City]):
    model = City
    writable_fields = ("name", "population", "image_url", "timezone")
