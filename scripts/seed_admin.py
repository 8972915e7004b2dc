"""Seed a superadmin"""
import asyncio
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from aus_cms.database import AsyncSessionLocal, close_db
from aus_cms.services.auth_service import AuthService
from aus_cms.core.logging_config import setup_logging

# Set up logger
logger = setup_logging("aus_cms.seed_admin", log_file="seed_admin.log")


async def create_superadmin(email: str, password: str):
    """Create superadmin unless an admin with this email exists"""
    try:
        async with AsyncSessionLocal() as db:
            await AuthService(db).ensure_superadmin(email, password)
    except Exception as e:
        logger.error(f"Failed to create superadmin: {e}", exc_info=True)
        raise
    finally:
        await close_db()


async def main():
    """Main function"""
    if len(sys.argv) < 3:
        logger.error("Usage: python scripts/seed_admin.py <email> <password>")
        sys.exit(1)

    email = sys.argv[1]
    password = sys.argv[2]

    logger.info(f"Creating superadmin: {email}")
    await create_superadmin(email, password)


if __name__ == "__main__":
    asyncio.run(main())
