from contextlib import asynccontextmanager
from typing import AsyncIterator
from sqlalchemy.ext.asyncio import AsyncSession

@asynccontextmanager
async def maybe_begin(session: AsyncSession) -> AsyncIterator[None]:
    """
    Run the block in one transaction.

    Joins the session's transaction when one is already open so nested service
    calls commit or roll back together; otherwise opens and owns it.
    """
    if session.in_transaction():
        yield
    else:
        async with session.begin():
            yield
