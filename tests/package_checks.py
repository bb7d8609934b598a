from __future__ import annotations

import asyncio
import logging
import sys

import httpx

import aretry
from aretry.predicates import RejectHttpStatus
from aretry.stop import StopAfterAttempt
from aretry.wait import NoWait

logger: logging.Logger = logging.getLogger(__name__)


def _flaky_transport() -> httpx.MockTransport:
    statuses = iter([503, 502, 200])
    return httpx.MockTransport(lambda request: httpx.Response(next(statuses)))


def check_retryer() -> None:
    logger.info("Checking Retryer...")
    retryer = aretry.Retryer(StopAfterAttempt(3), NoWait(), RejectHttpStatus())
    with httpx.Client(transport=_flaky_transport()) as client:
        response = retryer.call(lambda: client.get("https://example.com"))
    assert response.status_code == 200


def check_async_retryer() -> None:
    logger.info("Checking AsyncRetryer...")

    async def run() -> httpx.Response:
        retryer = aretry.AsyncRetryer(StopAfterAttempt(3), NoWait(), RejectHttpStatus())
        async with httpx.AsyncClient(transport=_flaky_transport()) as client:
            return await retryer.call(lambda: client.get("https://example.com"))

    assert asyncio.run(run()).status_code == 200


def check_config() -> None:
    logger.info("Checking RetryerConfig...")
    retryer = aretry.RetryerConfig(max_attempts=2, base_delay=0.0).build()
    try:
        retryer.call(lambda: 1 / 0)
    except aretry.RetryError as exc:
        assert exc.attempt_number == 2
    else:
        msg = "RetryError was not raised"
        raise AssertionError(msg)


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_retryer()
        check_async_retryer()
        check_config()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
