import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from sqlalchemy import insert  # noqa: E402

from booking_engine.api.deps import engine  # noqa: E402
from booking_engine.infrastructure.db.tables import metadata, offers, users  # noqa: E402


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
        await conn.run_sync(metadata.create_all)
        print("Recreated all tables.")

        await conn.execute(
            insert(users),
            [
                {"id": 1, "first_name": "Anna", "last_name": "Berger", "email": "anna@example.com"},
                {"id": 2, "first_name": "Jonas", "last_name": "Keller", "email": "jonas@example.com"},
            ],
        )
        await conn.execute(
            insert(offers),
            [
                {
                    "id": 1,
                    "owner_id": 1,
                    "title": "Cordless drill",
                    "description": "18V drill with two batteries",
                    "is_service": False,
                    "price_per_day": Decimal("15.00"),
                    "is_active": True,
                },
                {
                    "id": 2,
                    "owner_id": 1,
                    "title": "Garden help",
                    "description": "Hedge trimming and lawn care",
                    "is_service": True,
                    "price_per_hour": Decimal("5.00"),
                    "is_active": True,
                },
            ],
        )
        print("Seeded users and offers.")


if __name__ == "__main__":
    asyncio.run(seed())
