"""Product domain model — pure dataclass, no SQLAlchemy dependency."""
from dataclasses import dataclass


@dataclass
class Product:
    id: str
    name: str
    category: str
