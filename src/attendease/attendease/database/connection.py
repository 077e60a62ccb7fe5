from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from mysql.connector import pooling

from ..core.constants import DEFAULT_DB_POOL_SIZE

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_DB_POOL_SIZE
    pool_name: str = "attendease"


class DatabaseConnection:
    """Singleton-like DB connection factory backed by a connection pool.

    Note: ``connect()`` hands out a pooled connection; calling ``close()`` on it
    returns it to the pool instead of dropping the socket.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        if self._pool is None:
            logger.info(
                "Creating connection pool %s (size=%s) for %s@%s:%s/%s",
                self._config.pool_name,
                self._config.pool_size,
                self._config.user,
                self._config.host,
                self._config.port,
                self._config.database,
            )
            self._pool = pooling.MySQLConnectionPool(
                pool_name=self._config.pool_name,
                pool_size=int(self._config.pool_size),
                pool_reset_session=True,
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
                autocommit=False,
            )
        return self._pool

    def connect(self):
        return self._get_pool().get_connection()
