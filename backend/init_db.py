import asyncio
import logging
from services.config import app_config
from services.identity_store import Base, IdentityStore

logging.basicConfig(level=app_config.log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

async def init_models():
    """Create the identity tables."""
    store = IdentityStore.open(app_config.database_url, echo=app_config.db_echo)
    logger.info(f"Initializing database at {store.url} ({app_config.environment})")

    try:
        await store.create_schema()
        logger.info(f"Created tables: {list(Base.metadata.tables.keys())}")
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise
    finally:
        await store.dispose()

if __name__ == "__main__":
    asyncio.run(init_models())
