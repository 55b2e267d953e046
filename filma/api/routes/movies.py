# filma/api/routes/movies.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from filma.core.database import get_session
from filma.core.exceptions import NotFoundError
from filma.core.schemas.movie import Movie, MovieInput, MessageResponse, ErrorResponse
from filma.repositories.movie_repository import MovieRepository

router = APIRouter(prefix="/movies", tags=["Movies"])

NOT_FOUND = {404: {"model": MessageResponse, "description": "Film non trouvé"}}
SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Erreur de la base de données"}}
INVALID = {422: {"model": ErrorResponse, "description": "Données invalides"}}


def get_movie_repository(session: AsyncSession = Depends(get_session)) -> MovieRepository:
    return MovieRepository(session)


@router.get(
    "",
    response_model=list[Movie],
    summary="Récupère la liste de tous les films",
    responses={**SERVER_ERROR},
)
@router.get("/", response_model=list[Movie], include_in_schema=False)
async def list_movies(repo: MovieRepository = Depends(get_movie_repository)):
    return await repo.list_all()


@router.get(
    "/{movie_id}",
    response_model=Movie,
    summary="Récupère un film par son ID",
    responses={**NOT_FOUND, **INVALID, **SERVER_ERROR},
)
async def get_movie(movie_id: int, repo: MovieRepository = Depends(get_movie_repository)):
    movie = await repo.get_by_id(movie_id)
    if movie is None:
        raise NotFoundError()
    return movie


@router.post(
    "",
    response_model=Movie,
    status_code=status.HTTP_201_CREATED,
    summary="Crée un nouveau film",
    responses={**INVALID, **SERVER_ERROR},
)
@router.post("/", response_model=Movie, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_movie(movie_in: MovieInput, repo: MovieRepository = Depends(get_movie_repository)):
    return await repo.create(movie_in)


@router.put(
    "/{movie_id}",
    response_model=Movie,
    summary="Met à jour un film existant",
    description=(
        "Remplacement complet : les champs optionnels absents du corps "
        "sont remis à null, `is_new` à false."
    ),
    responses={**NOT_FOUND, **INVALID, **SERVER_ERROR},
)
async def update_movie(
    movie_id: int,
    movie_in: MovieInput,
    repo: MovieRepository = Depends(get_movie_repository),
):
    movie = await repo.update(movie_id, movie_in)
    if movie is None:
        raise NotFoundError()
    return movie


@router.delete(
    "/{movie_id}",
    response_model=MessageResponse,
    summary="Supprime un film",
    responses={**NOT_FOUND, **INVALID, **SERVER_ERROR},
)
async def delete_movie(movie_id: int, repo: MovieRepository = Depends(get_movie_repository)):
    if not await repo.delete(movie_id):
        raise NotFoundError()
    return MessageResponse(message="Film supprimé avec succès")
