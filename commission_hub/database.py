from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession, AsyncEngine
from sqlalchemy.exc import SQLAlchemyError

from commission_hub.config import env_config, build_database_url
from commission_hub.models.base import Base
from commission_hub.models import commission, personnel, sales  # noqa: F401  registers the tables
from commission_hub.utils.logger import app_logger


def create_engine_from_config(db_config: dict, pool_config: dict = None) -> AsyncEngine:
    """Create the async engine, pool settings only apply to server databases"""
    url = build_database_url(db_config)
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=False)

    pool_config = pool_config or {}
    return create_async_engine(url,
                               pool_size=pool_config.get('size', 10),
                               max_overflow=pool_config.get('max_overflow', 20),
                               pool_pre_ping=True,
                               pool_recycle=pool_config.get('recycle', 3600),
                               echo=False)


engine = create_engine_from_config(env_config['database'], env_config.get('pool'))

SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(target_engine: AsyncEngine = None):
    """
    Create every table that does not exist yet
    """
    target_engine = target_engine or engine
    async with target_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    app_logger.info("Database tables created successfully")


async def get_db():
    """Yield one database session per request"""
    async_session = None
    try:
        async_session = SessionLocal()
        yield async_session
    except SQLAlchemyError as e:
        app_logger.error(f"Database operation error: {e}")
        raise
    finally:
        if async_session is not None:
            try:
                await async_session.close()
            except Exception as e:
                app_logger.error(f"Error closing database session: {e}")
