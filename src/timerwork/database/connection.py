from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import mysql.connector

from ..core.exceptions import InternalError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "admin")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "timerwork")),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """DB connection factory shared by the repositories.

    Note: We create short-lived connections per operation; pooling is left to driver defaults.
    """

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self, *, with_database: bool = True):
        kwargs = dict(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
        )
        if with_database:
            kwargs["database"] = self._config.database
        return mysql.connector.connect(**kwargs)

    def ping(self) -> None:
        conn = self.connect(with_database=False)
        try:
            conn.ping(reconnect=False)
        finally:
            conn.close()

    def wait_until_ready(self, *, attempts: int = 30, delay: float = 2.0, sleep=time.sleep) -> None:
        """Probe the server until it answers, with a fixed backoff between attempts."""
        attempts = max(1, int(attempts))
        last_error: Exception | None = None
        for attempt in range(1, attempts + 1):
            try:
                self.ping()
                return
            except mysql.connector.Error as e:
                last_error = e
                logger.info("Waiting for database... attempt %d/%d", attempt, attempts)
                if attempt < attempts:
                    sleep(delay)

        raise InternalError(
            f"Failed to reach database {self._config.describe()} after {attempts} attempts: {last_error}"
        )
