"""Seed the countries table with the default African countries."""

import asyncio
import sys

import config
import logging_config
from db import AsyncSessionLocal
from services.countries_service import seed_default_countries


async def seed_db() -> int:
    async with AsyncSessionLocal() as db:
        inserted = await seed_default_countries(db)

    print("=" * 50)
    print("SEED COUNTRIES")
    print("=" * 50)
    print(f"\nInserted: {inserted}")
    return inserted


if __name__ == "__main__":
    logging_config.setup_logging(config.settings.LOG_LEVEL)
    # Fix for Windows asyncio
    if sys.platform == "win32":
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())
    asyncio.run(seed_db())
