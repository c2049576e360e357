"""
Database Reset Script
Run this to drop the catalog tables and rebuild the schema fresh.
"""

import asyncio
import sys
sys.path.append('src')

from infrastructure.config import get_settings, setup_logger
from infrastructure.database import Database

logger = setup_logger()


async def reset_database():
    """Drop all tables and recreate them."""
    settings = get_settings()
    database = Database(settings.sqlalchemy_url, echo=settings.database_echo)
    try:
        logger.info("🔥 Dropping all tables...")
        await database.drop_all()
        logger.info("✅ All tables dropped")

        logger.info("🏗️ Creating fresh tables...")
        await database.init_db()
        logger.info("✅ Fresh database ready!")

    except Exception as e:
        logger.error(f"❌ Error: {e}")
        raise
    finally:
        await database.close_db()

if __name__ == "__main__":
    print("\n⚠️  WARNING: This will DELETE ALL DATA in the database!\n")
    response = input("Are you sure? Type 'yes' to continue: ")

    if response.lower() == 'yes':
        asyncio.run(reset_database())
        print("\n✅ Database has been reset successfully!\n")
    else:
        print("\n❌ Cancelled.\n")
