"""Initialize database tables.

Usage: python -m videoboard.init_db [--reset]
"""

import asyncio
import sys

from videoboard.app.db.base import engine, Base
# Import all models to register them
from videoboard.app.models.suggestion import Suggestion
from videoboard.app.models.vote import Vote


async def init_db(reset: bool = False):
    """Create all database tables, optionally dropping existing ones first."""
    async with engine.begin() as conn:
        if reset:
            # Drop all tables (for development)
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()

    print("Database tables created successfully!")


if __name__ == "__main__":
    asyncio.run(init_db(reset="--reset" in sys.argv[1:]))
