"""Shared plumbing for the one-shot data-access scripts.

Every script follows the same life cycle: parse arguments, open a scoped
database client, run exactly one operation in one session, print the result
as JSON on stdout, release the client and exit.
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any, Awaitable, Callable

from pydantic import BaseModel

from todo_app.database import connect
from todo_app.errors import TodoAppError

logger = logging.getLogger(__name__)

Operation = Callable[[Any], Awaitable[Any]]


def build_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy async URL (defaults to $DATABASE_URL)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def render(result: Any) -> str:
    if isinstance(result, BaseModel):
        return result.model_dump_json(indent=2)
    if isinstance(result, list):
        return json.dumps(
            [item.model_dump(mode="json") for item in result],
            indent=2,
        )
    return json.dumps(result, indent=2, default=str)


async def execute(operation: Operation, database_url: str | None = None) -> Any:
    """Run ``operation(session)`` against a freshly opened, then disposed, client."""
    async with connect(database_url) as sessions:
        async with sessions() as session:
            return await operation(session)


def run(operation: Operation, args: argparse.Namespace) -> int:
    setup_logging(args.verbose)
    try:
        result = asyncio.run(execute(operation, args.database_url))
    except TodoAppError as exc:
        logger.error("%s", exc)
        return 1
    print(render(result))
    return 0
