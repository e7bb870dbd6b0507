# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

import asyncio
import json
import logging
from datetime import datetime, timezone

from deepprune import DeepSanitizer, prune_result, sanitize
from deepprune.exceptions import CyclicInputError

# Basic logging setup
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


# --- 1. One-off cleanup before serialization ---

order = {
    "id": 1042,
    "customer": {"name": "Ada", "email": "   ", "phone": None},
    "discount": 0,
    "gift": False,
    "items": [{"sku": "A-1", "note": ""}, {}, None],
    "created": datetime(2024, 5, 17, 9, 30, tzinfo=timezone.utc),
    "on_update": lambda: None,
}


# --- 2. Decorated async "tool" whose result is always pruned ---

@prune_result("orders.lookup")
async def lookup_order(order_id: int):
    """Simulate a data-access call that returns sparse records."""
    await asyncio.sleep(0.05)
    return {"id": order_id, "status": "shipped", "tracking": None, "events": [{}, {"at": "depot"}]}


async def main():
    print("--- sanitize() ---")
    print(json.dumps(sanitize(order), default=str, indent=2))

    print("\n--- DeepSanitizer() with pruned paths ---")
    result = DeepSanitizer().sanitize(order)
    for path in result.pruned:
        print(f"  pruned {path}")

    print("\n--- @prune_result ---")
    print(await lookup_order(7))

    print("\n--- cyclic input ---")
    loop = {"name": "loop"}
    loop["self"] = loop
    try:
        sanitize(loop)
    except CyclicInputError as exc:
        logging.warning("Refused to sanitize: %s", exc.message)


if __name__ == "__main__":
    asyncio.run(main())
