import asyncio

from sqlalchemy import text

from meetnotes.config import get_settings
from meetnotes.infrastructure.database import Database


async def clear_data():
    database = Database(get_settings())
    try:
        async with database.session_factory() as session:
            result = await session.execute(text("DELETE FROM summaries"))
            await session.commit()
            print(f"Database cleared! {result.rowcount} summaries removed.")
    finally:
        await database.dispose()


asyncio.run(clear_data())
