"""
Database table creation script for the Contact Manager API
This script creates all database tables and tests the database connection.
Run this script after setting up your database to initialize the schema.
"""

import asyncio
import logging

from sqlalchemy import func, select

from database import db_manager
from models import Contact

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def create_tables() -> bool:
    """
    Create all database tables defined in the models
    This function ensures all tables exist and are queryable
    """
    try:
        logger.info("Starting database table creation...")

        if not await db_manager.test_connection():
            logger.error("Database connection failed - cannot create tables")
            return False

        await db_manager.create_tables()

        async with db_manager.get_session() as session:
            count = (await session.execute(select(func.count(Contact.id)))).scalar()
            logger.info(f"Contacts table accessible - current count: {count}")

        return True

    except Exception as e:
        logger.error(f"Failed to create database tables: {e}")
        return False

    finally:
        await db_manager.dispose()


def main():
    """Main function to run the table creation"""
    logger.info("Contact Manager API - Database Setup")
    logger.info("=" * 50)

    success = asyncio.run(create_tables())

    if success:
        logger.info("Database setup completed successfully!")
        logger.info("You can now start the API server with: python main.py")
    else:
        logger.error("Database setup failed!")
        logger.error("Please check your database configuration and try again")

    return success


if __name__ == "__main__":
    main()
