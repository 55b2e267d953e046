# filma/repositories/movie_repository.py
import functools
import logging
from typing import Optional
from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from filma.models.movie import Movie
from filma.core.schemas.movie import MovieInput
from filma.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

# Bornes de la colonne Integer movies.id
MOVIE_ID_MIN = -2**31
MOVIE_ID_MAX = 2**31 - 1


def id_in_range(movie_id: int) -> bool:
    return MOVIE_ID_MIN <= movie_id <= MOVIE_ID_MAX


def storage_call(method):
    """Convertit toute erreur du pilote en DatabaseError, après rollback"""
    @functools.wraps(method)
    async def wrapper(self, *args, **kwargs):
        try:
            return await method(self, *args, **kwargs)
        except SQLAlchemyError as e:
            await self.session.rollback()
            error = DatabaseError()
            logger.error(
                f"Storage failure in MovieRepository.{method.__name__} "
                f"[reference={error.reference}]: {e}",
                exc_info=True,
            )
            raise error from e
    return wrapper


class MovieRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    @storage_call
    async def list_all(self) -> list[Movie]:
        """Tous les films, dans l'ordre du stockage"""
        result = await self.session.execute(select(Movie))
        return list(result.scalars().all())

    @storage_call
    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        if not id_in_range(movie_id):
            return None
        stmt = select(Movie).where(Movie.id == movie_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @storage_call
    async def create(self, movie_in: MovieInput) -> Movie:
        """Insère un film, l'id est attribué par la base"""
        db_movie = Movie(**movie_in.model_dump())
        self.session.add(db_movie)
        await self.session.commit()
        await self.session.refresh(db_movie)
        logger.info(f"Created movie #{db_movie.id}")
        return db_movie

    @storage_call
    async def update(self, movie_id: int, movie_in: MovieInput) -> Optional[Movie]:
        """Remplace toutes les colonnes du film. None si aucune ligne ne correspond."""
        if not id_in_range(movie_id):
            return None
        stmt = (
            update(Movie)
            .where(Movie.id == movie_id)
            .values(**movie_in.model_dump())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        if result.rowcount == 0:
            return None

        logger.info(f"Updated movie #{movie_id}")
        stmt = select(Movie).where(Movie.id == movie_id).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @storage_call
    async def delete(self, movie_id: int) -> bool:
        if not id_in_range(movie_id):
            return False
        stmt = delete(Movie).where(Movie.id == movie_id).execution_options(synchronize_session=False)
        result = await self.session.execute(stmt)
        await self.session.commit()
        if result.rowcount == 0:
            return False

        logger.info(f"Deleted movie #{movie_id}")
        return True
