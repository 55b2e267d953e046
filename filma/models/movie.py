# filma/models/movie.py
from sqlalchemy import Column, Integer, String, Boolean, false
from .base import Base


class Movie(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title_file = Column(String(255), nullable=False)
    disk = Column(String(255), nullable=True)
    file = Column(String(255), nullable=True)
    sub_file = Column(String(255), nullable=True)   # Fichier de sous-titres
    type_file = Column(String(50), nullable=True)   # Extension : mp4, mkv...
    size = Column(String(50), nullable=True)        # Taille lisible : 1.5GB
    is_new = Column(Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self):
        return f"<Movie(id={self.id}, title_file={self.title_file})>"
