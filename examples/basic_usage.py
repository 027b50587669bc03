"""examples/basic_usage.py - gelflog integration demo.

Demonstrates the three kinds of records a GELF collector sees:
    Scenario A - single-line INFO record with additional fields
    Scenario B - multi-line message, split into short and full message
    Scenario C - ERROR record with an exception field and call-site fields
"""

import logging
import sys

from gelflog import GelfFormatter

# ---------------------------------------------------------------------------
# gelflog integration: one formatter on the handler you already have
# ---------------------------------------------------------------------------
handler = logging.StreamHandler(sys.stdout)
handler.setFormatter(GelfFormatter(facility="application-name"))

logging.basicConfig(level=logging.DEBUG, handlers=[handler])
logger = logging.getLogger("app")


def get_balance(user_id: int) -> int:
    """Simulate a DB balance query."""
    logger.debug("Querying balance from DB", extra={"user_id": user_id})
    return 3_000


def pay(user_id: int, amount: int) -> None:
    """Simulate a payment flow."""
    logger.info("Payment attempt", extra={"user_id": user_id, "amount": amount})
    balance = get_balance(user_id)

    if balance < amount:
        err = ValueError(f"InsufficientFunds: balance={balance}, amount={amount}")
        # _file and _line name this line, not the logging module
        logger.error("Payment rejected", extra={"err": err, "user_id": user_id})
        raise err

    logger.info("Payment successful")


if __name__ == "__main__":
    print("Scenario A: single-line record with additional fields")
    logger.info("animal", extra={"animal": "walrus"})

    print("\nScenario B: multi-line message")
    logger.info("Starting application.\nWaiting for request ...")

    print("\nScenario C: error with exception field")
    try:
        pay(user_id=101, amount=5_000)
    except ValueError:
        logger.exception("Payment flow aborted")
