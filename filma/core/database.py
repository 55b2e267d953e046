# filma/core/database.py
from typing import AsyncGenerator
from fastapi import Request
from sqlalchemy import text
from sqlalchemy.pool import AsyncAdaptedQueuePool
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from filma.models import Base


class DatabaseHelper:
    def __init__(
            self,
            url: str,
            echo: bool = False,
            pool_size: int = 5,
            max_overflow: int = 10,
    ):
        self.engine: AsyncEngine = create_async_engine(
            url=url,
            echo=echo,
            poolclass=AsyncAdaptedQueuePool,
            pool_size=pool_size,
            max_overflow=max_overflow,
        )
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
        )

    async def ping(self) -> int:
        """Vérifie la connexion avec un SELECT 1"""
        async with self.session_factory() as session:
            result = await session.execute(text("SELECT 1"))
            return result.scalar()

    async def create_tables(self) -> None:
        """Crée les tables manquantes (CREATE TABLE IF NOT EXISTS)"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self):
        """Ferme toutes les connexions du pool"""
        await self.engine.dispose()

    async def session_getter(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.session_factory() as session:
            yield session


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dépendance FastAPI : une session par requête, prise sur le helper de l'application"""
    db_helper: DatabaseHelper = request.app.state.db_helper
    async for session in db_helper.session_getter():
        yield session
