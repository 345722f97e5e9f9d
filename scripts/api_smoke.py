"""Quick manual smoke test for the Card Monitor API."""

from __future__ import annotations

import asyncio
import base64
import os
import sys
import time

import httpx

API_BASE = os.getenv("CARDMONITOR_API_URL", "http://127.0.0.1:8787/api")


async def main() -> None:
    async with httpx.AsyncClient(base_url=API_BASE, timeout=10) as client:
        health = await client.get("/health")
        print("Health", health.status_code, health.json())

        resp = await client.get("/data")
        if resp.status_code != 200:
            print("Data request failed", resp.status_code, resp.json())
            sys.exit(1)
        cards = resp.json()
        print("Cards", len(cards))
        for card in cards:
            sector_map = base64.b64decode(card["data"])
            print(
                f"  {card['id']:>4} {card['name']:<20} round={card['cur_round_num']} "
                f"bad={card['num_bad_sectors']} map={len(sector_map)}B"
            )

        since = int(time.time()) - 300
        recent = await client.get("/data", params={"since": since})
        recent.raise_for_status()
        print(f"Updated in the last 5 minutes: {len(recent.json())}")


if __name__ == "__main__":
    asyncio.run(main())
