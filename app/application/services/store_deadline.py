"""Deadline for store interactions made on behalf of one request."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from app.application.exceptions import StoreTimeoutError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_deadline(seconds: float | None) -> AsyncIterator[None]:
    """
    Bound the enclosed store work by ``seconds``.

    Wrap the whole unit-of-work block so that a timeout cancels it before
    commit and the UoW rolls back. ``None`` disables the deadline.

    Raises:
        StoreTimeoutError: If the deadline passes
    """
    try:
        async with asyncio.timeout(seconds):
            yield
    except TimeoutError as exc:
        logger.warning("Store call exceeded deadline of %ss", seconds)
        raise StoreTimeoutError() from exc
