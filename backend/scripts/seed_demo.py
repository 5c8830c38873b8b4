"""
Seed a demo user and a demo table for development.
Run: python -m scripts.seed_demo  (from backend/)
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from tabula.db.models.table import Table
from tabula.db.models.user import User
from tabula.repositories.users import create_user, get_user_by_email
from tabula.services.tables import create_table


DEMO_USER = {
    "email": "demo@tabula.dev",
    "password": "demo1234",  # Change in production!
}

DEMO_TABLE = {
    "name": "Contacts",
    "fields": [
        {"name": "Full name", "type": "text", "required": True},
        {"name": "Email", "type": "email", "required": True},
        {"name": "Phone", "type": "phone"},
        {"name": "Website", "type": "url"},
        {"name": "Stage", "type": "dropdown", "options": ["Lead", "Customer", "Churned"]},
        {"name": "Tags", "type": "multiselect", "options": ["vip", "partner", "press"]},
        {"name": "Subscribed", "type": "checkbox"},
    ],
}


async def seed(db: AsyncSession) -> tuple[User, Table | None]:
    """Create the demo user (once) and give them a demo table."""
    user = await get_user_by_email(db, DEMO_USER["email"])
    if user is not None:
        return user, None

    user = await create_user(db, **DEMO_USER)
    table = await create_table(db, owner_id=user.id, **DEMO_TABLE)
    return user, table


async def main() -> None:
    from tabula.db.session import async_session

    async with async_session() as session:
        user, table = await seed(session)
        await session.commit()

    if table is None:
        print(f"  Demo user already present: {user.email}")
    else:
        print(f"  Created user: {user.email}")
        print(f"  Created table: {table.name} ({len(table.fields)} fields)")


if __name__ == "__main__":
    asyncio.run(main())
