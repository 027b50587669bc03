"""examples/multithreaded_usage.py - One formatter shared by many threads.

GelfFormatter resolves its host and facility once and never changes them, and
each record is rendered into its own scratch buffer. A single instance can
therefore format records from any number of threads at once; every line on
stdout is one complete GELF document.

Run:
    python examples/multithreaded_usage.py
"""

import logging
import sys
import threading
import time

from gelflog import GelfFormatter

# ---------------------------------------------------------------------------
# Setup: one handler on the root logger, picked up by all threads
# ---------------------------------------------------------------------------
handler = logging.StreamHandler(sys.stdout)
handler.setFormatter(GelfFormatter(facility="order_service"))
logging.basicConfig(level=logging.DEBUG, handlers=[handler])

logger = logging.getLogger("order_service")


def fetch_inventory(product_id: int) -> int:
    """Simulate a DB read for product stock."""
    logger.debug("Fetching inventory", extra={"product_id": product_id})
    time.sleep(0.01)  # simulate DB latency
    stock = {1: 10, 2: 0, 3: 5}  # product 2 is out-of-stock
    return stock.get(product_id, 0)


def place_order(order_id: int, product_id: int, qty: int) -> dict:
    """Attempt to place an order for the given product and quantity."""
    fields = {"order_id": order_id, "product_id": product_id, "qty": qty}
    logger.info("Order received", extra=fields)
    stock = fetch_inventory(product_id)

    if stock < qty:
        logger.error("Insufficient stock", extra={**fields, "available": stock})
        raise RuntimeError(f"OutOfStock: product_id={product_id}")

    logger.info("Order placed", extra=fields)
    return {"order_id": order_id, "status": "confirmed"}


def worker(order_id: int, product_id: int, qty: int) -> None:
    """Worker function representing a single HTTP request handler."""
    try:
        place_order(order_id=order_id, product_id=product_id, qty=qty)
    except RuntimeError:
        pass


if __name__ == "__main__":
    threads = [
        threading.Thread(target=worker, args=(1000 + n, n % 3 + 1, 3), name=f"T-{n}")
        for n in range(6)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
