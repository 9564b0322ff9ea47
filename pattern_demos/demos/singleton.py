"""
Singleton Pattern: Creational Design Pattern

Ensures a class has exactly one instance and offers a global access point to
it. Typical uses are database connections, configuration, logging services
and thread pools.

Key components:
- A class-level slot holding the one instance
- Construction that hands back the existing instance instead of a new one
- A get_instance() access point
"""

import threading
from typing import Optional

from pattern_demos.config import AppConfig, load_config
from pattern_demos.demos.narration import print_rule
from pattern_demos.domain.exceptions import DatabaseNotConnectedError
from pattern_demos.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)

DEFAULT_CONNECTION_STRING = "mongodb://localhost:27017/mydb"


class Database:
    """Database connection shared by the whole process."""

    _instance: Optional["Database"] = None
    _lock = threading.RLock()

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._initialized = False
                    cls._instance = instance
        return cls._instance

    def __init__(self, connection_string: str = DEFAULT_CONNECTION_STRING):
        # Re-instantiation must not reset an existing connection
        with type(self)._lock:
            if self._initialized:
                return
            self.connection_string = connection_string
            self.connected = False
            self._initialized = True

    @classmethod
    def get_instance(cls, connection_string: str = DEFAULT_CONNECTION_STRING) -> "Database":
        """Get the shared instance, creating it on first use."""
        return cls(connection_string)

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared instance (primarily for testing)."""
        with cls._lock:
            cls._instance = None

    def connect(self) -> None:
        if self.connected:
            print("Already connected to database")
            return
        print(f"Connecting to database: {self.connection_string}")
        self.connected = True

    def query(self, sql: str) -> None:
        """
        Run a query.

        Raises:
            DatabaseNotConnectedError: If connect() has not been called
        """
        if not self.connected:
            raise DatabaseNotConnectedError()
        logger.debug("Executing query", sql=sql)
        print(f"Executing query: {sql}")


def run(config: Optional[AppConfig] = None) -> None:
    """Show that every access path yields the same Database object."""
    config = config or AppConfig()
    print_rule(config.display, "=")
    print("Demo Singleton Pattern")

    # Each run starts from a process without a database instance
    Database.reset_instance()
    connection_string = config.singleton.connection_string

    db1 = Database.get_instance(connection_string)
    db2 = Database.get_instance(connection_string)

    print("Are db1 and db2 the same instance?", db1 is db2)

    db1.connect()
    db1.query("SELECT * FROM users")

    db2.connect()
    db2.query("SELECT * FROM products")

    db3 = Database()
    print("Is db3 the same instance?", db1 is db3)


def main() -> None:
    config = load_config()
    setup_logging(config.logging)
    run(config)


if __name__ == "__main__":
    main()
