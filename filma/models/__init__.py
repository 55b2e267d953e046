# filma/models/__init__.py
from .base import Base
from .movie import Movie

__all__ = [
    "Base",
    "Movie",
]
