#!/usr/bin/env python3
"""Give every legacy client invitation a uuid, with Logfire error tracking."""

import asyncio
import sys

import logfire

from ledger.application.usecase.invitation import (
    BackfillInvitationUuidsRequest,
    BackfillInvitationUuidsUseCase,
)
from ledger.config import Settings
from ledger.util.di.container import create_container
from ledger.util.logging import setup_logging
from ledger.util.observability import configure_logfire


async def run(batch_size: int | None) -> int:
    """Run the backfill inside one request scope and return the row count."""
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(BackfillInvitationUuidsUseCase)
            response = await use_case.execute(
                BackfillInvitationUuidsRequest(batch_size=batch_size)
            )
            return response.backfilled
    finally:
        await container.close()


def main() -> int:
    """Run the backfill and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    batch_size = int(sys.argv[1]) if len(sys.argv) > 1 else None

    try:
        logfire.info("Starting invitation uuid backfill")
        backfilled = asyncio.run(run(batch_size))
        logfire.info("Invitation uuid backfill completed", backfilled=backfilled)
        return 0

    except Exception as e:
        logfire.error(
            "Invitation uuid backfill failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
