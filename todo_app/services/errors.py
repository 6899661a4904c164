import logging
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.errors import ConnectivityError, ConstraintViolationError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def translate_db_errors(db: AsyncSession, operation: str):
    """Roll back and re-raise store failures as TodoAppError subclasses."""
    try:
        yield
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("%s rejected by the store: %s", operation, exc.orig)
        raise ConstraintViolationError(f"{operation} violated a store constraint: {exc.orig}") from exc
    except (OperationalError, InterfaceError) as exc:
        logger.error("%s failed to reach the database: %s", operation, exc.orig)
        raise ConnectivityError(f"{operation} could not reach the database") from exc
