"""Request-scoped dependencies of the catalog routers."""

from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from catalogadmin.config.database import db_manager


async def get_db() -> AsyncIterator[AsyncSession]:
    """
    Catalog session for one request.

    Every write of a request (the entity plus its association rows) shares
    this session, so it is committed once when the endpoint returns and
    rolled back when it raises. Tests swap it out through
    ``app.dependency_overrides`` to use their own database.

    Yields
    ------
    AsyncSession
        Session bound to the configured catalog database.
    """
    async for session in db_manager.get_session():
        yield session
