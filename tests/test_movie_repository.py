import pytest
from sqlalchemy import text
from filma.core.exceptions import DatabaseError
from filma.core.schemas.movie import MovieInput
from filma.repositories.movie_repository import MovieRepository


@pytest.mark.asyncio
async def test_create_assigns_id_and_defaults(session):
    repo = MovieRepository(session)

    movie = await repo.create(MovieInput(title_file="Inception", file="inception.mp4"))

    assert movie.id is not None
    assert movie.title_file == "Inception"
    assert movie.file == "inception.mp4"
    assert movie.is_new is False


@pytest.mark.asyncio
async def test_ids_are_unique(session):
    repo = MovieRepository(session)

    first = await repo.create(MovieInput(title_file="Inception"))
    second = await repo.create(MovieInput(title_file="Alien"))

    assert first.id != second.id
    assert len(await repo.list_all()) == 2


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none(session):
    repo = MovieRepository(session)
    assert await repo.get_by_id(12345) is None


@pytest.mark.asyncio
async def test_update_keeps_id_and_overwrites_columns(session):
    repo = MovieRepository(session)
    movie = await repo.create(MovieInput(title_file="Heat", disk="Disque1", is_new=True))

    updated = await repo.update(movie.id, MovieInput(title_file="Heat (1995)"))

    assert updated is not None
    assert updated.id == movie.id
    assert updated.title_file == "Heat (1995)"
    assert updated.disk is None
    assert updated.is_new is False


@pytest.mark.asyncio
async def test_update_missing_returns_none(session):
    repo = MovieRepository(session)

    assert await repo.update(99, MovieInput(title_file="Ghost")) is None
    assert await repo.list_all() == []


@pytest.mark.asyncio
async def test_delete_reports_affected_rows(session):
    repo = MovieRepository(session)
    movie = await repo.create(MovieInput(title_file="Alien"))

    assert await repo.delete(movie.id) is True
    assert await repo.delete(movie.id) is False
    assert await repo.get_by_id(movie.id) is None


@pytest.mark.asyncio
async def test_driver_errors_become_database_error(session):
    await session.execute(text("DROP TABLE movies"))
    await session.commit()
    repo = MovieRepository(session)

    with pytest.raises(DatabaseError) as exc_info:
        await repo.list_all()

    assert exc_info.value.status_code == 500
    assert exc_info.value.__cause__ is not None
    assert "no such table" not in exc_info.value.detail


@pytest.mark.asyncio
async def test_out_of_range_ids_match_nothing(session):
    repo = MovieRepository(session)
    huge = 2**64

    assert await repo.get_by_id(huge) is None
    assert await repo.update(huge, MovieInput(title_file="Ghost")) is None
    assert await repo.delete(-huge) is False
    assert await repo.list_all() == []
