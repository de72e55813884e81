#!/usr/bin/env python3
"""Apply pending follow-ups (counter deltas and notification writes).

Follow-ups are applied inline after each write; this worker retries the ones
that failed there. Run once from cron, or with --interval as a loop.
"""

import argparse
import asyncio
import sys

import logfire
from dishka import AsyncContainer

from inkwell.application.usecase.follow_up import (
    DrainFollowUpsRequest,
    DrainFollowUpsUseCase,
)
from inkwell.config import Settings
from inkwell.util.di.container import create_container
from inkwell.util.logging import setup_logging
from inkwell.util.observability import configure_logfire


async def drain_once(container: AsyncContainer, limit: int | None) -> int:
    """Drain one batch. Returns the number of follow-ups processed."""
    async with container() as request_container:
        use_case = await request_container.get(DrainFollowUpsUseCase)
        result = await use_case.execute(DrainFollowUpsRequest(limit=limit))

    logfire.info(
        "Follow-up drain finished",
        applied=result.applied,
        retrying=result.retrying,
        failed=result.failed,
    )
    return result.applied + result.retrying + result.failed


async def run(limit: int | None, interval: float | None) -> None:
    container = create_container()
    try:
        while True:
            await drain_once(container, limit)
            if interval is None:
                return
            await asyncio.sleep(interval)
    finally:
        await container.close()


def main() -> int:
    parser = argparse.ArgumentParser(description="Drain pending follow-ups")
    parser.add_argument(
        "--limit", type=int, default=None, help="Batch size (defaults to settings)."
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds between drains. Omit to drain once and exit.",
    )
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        asyncio.run(run(args.limit, args.interval))
        return 0
    except Exception as e:
        logfire.error(
            "Follow-up drain failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
