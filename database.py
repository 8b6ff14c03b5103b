# database.py
"""
Rasoi MongoDB Database Connection.

Uses Motor async driver. The client is created lazily on first use and
shared by every request for the lifetime of the process.
"""

import asyncio
import logging
from typing import Callable, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from app.utils.errors import ConfigurationError, StoreConnectionError
from settings import settings

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
MENUS_COLLECTION = "menus"


def create_motor_client(database_url: str) -> AsyncIOMotorClient:
    """Create a Motor client pinned to Stable API v1."""
    return AsyncIOMotorClient(
        database_url,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
        serverSelectionTimeoutMS=5000,  # 5 second timeout
        maxPoolSize=50,
    )


class Database:
    """
    MongoDB connection manager.

    Uses lazy initialization: the client is established on the first call
    to get_connection(), not at import time. Concurrent first callers wait
    on a single connect attempt.

    Attributes:
        client: Motor async client instance, None until connected.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        database_name: str = "rasoi",
        client_factory: Callable[[str], AsyncIOMotorClient] = create_motor_client,
    ):
        self.database_url = database_url
        self.database_name = database_name
        self.client: Optional[AsyncIOMotorClient] = None
        self._client_factory = client_factory
        self._db: Optional[AsyncIOMotorDatabase] = None
        self._lock = asyncio.Lock()

    @property
    def connected(self) -> bool:
        return self._db is not None

    async def get_connection(self) -> AsyncIOMotorDatabase:
        """
        Get the shared database handle, connecting on first use.

        Returns:
            AsyncIOMotorDatabase: Database reference.

        Raises:
            ConfigurationError: If MONGODB_URI is not set.
            StoreConnectionError: If the connect attempt fails.
        """
        if self._db is not None:
            return self._db

        async with self._lock:
            # Another caller may have connected while we waited
            if self._db is None:
                await self._connect()

        return self._db

    async def _connect(self) -> None:
        if not self.database_url:
            raise ConfigurationError("MONGODB_URI environment variable not set")

        client = None
        try:
            logger.info("🔌 Connecting to MongoDB...")
            client = self._client_factory(self.database_url)
            await client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"❌ Error connecting to MongoDB: {e}")
            if client is not None:
                client.close()
            raise StoreConnectionError(str(e)) from e

        db = client[self.database_name]
        await self._ensure_indexes(db)

        self.client = client
        self._db = db
        logger.info(f"✅ MongoDB connected: {self.database_name}")

    async def _ensure_indexes(self, db: AsyncIOMotorDatabase) -> None:
        """Create the unique key indexes for both collections."""
        try:
            await db[USERS_COLLECTION].create_index("userId", unique=True)
            await db[MENUS_COLLECTION].create_index(
                [("userId", ASCENDING), ("weekStart", ASCENDING)],
                unique=True,
            )
        except PyMongoError as e:
            # Existing duplicate documents block the index, not the service
            logger.warning(f"Could not create MongoDB indexes: {e}")

    async def users(self) -> AsyncIOMotorCollection:
        """Collection of user profiles, one document per userId."""
        db = await self.get_connection()
        return db[USERS_COLLECTION]

    async def menus(self) -> AsyncIOMotorCollection:
        """Collection of weekly menus, one document per (userId, weekStart)."""
        db = await self.get_connection()
        return db[MENUS_COLLECTION]

    async def ping(self) -> bool:
        """Test MongoDB connection."""
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError:
            return False

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed")
        self.client = None
        self._db = None


database = Database(settings.MONGODB_URI, settings.DATABASE_NAME)


async def get_database() -> Database:
    """Dependency to get the shared database manager."""
    return database
