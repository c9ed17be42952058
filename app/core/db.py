import logging
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

logger = logging.getLogger(__name__)


class Database:
    """Пул соединений с хранилищем.

    Один экземпляр живет в ``app.state.db`` все время работы процесса
    и выдает по одной ``AsyncSession`` на запрос.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self._url = database_url
        self._echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected")
        return self._engine

    def connect(self) -> None:
        """Создание движка и пула соединений"""
        self._engine = create_async_engine(self._url, echo=self._echo, pool_pre_ping=True)
        self._sessionmaker = async_sessionmaker(bind=self._engine, expire_on_commit=False)
        logger.info("Database engine created")

    async def disconnect(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None
        self._sessionmaker = None

    async def session(self) -> AsyncIterator[AsyncSession]:
        if self._sessionmaker is None:
            raise RuntimeError("Database is not connected")
        async with self._sessionmaker() as session:
            yield session


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Функция для dependency injection в FastAPI"""
    database: Database = request.app.state.db
    async for session in database.session():
        yield session
