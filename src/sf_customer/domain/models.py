"""Customer record as stored in the `customer` table and the cache."""
from dataclasses import dataclass


@dataclass
class Customer:
    id: str
    name: str
    gender: str
