"""
Database connection management for MySQL Dump Importer.
"""

import logging
import shlex
from typing import Optional, Any

import mysql.connector
from mysql.connector import Error as MySQLError


class DatabaseConnection:
    """Manages MySQL database connections with context manager support."""

    DEFAULT_PORT = 3306
    DEFAULT_CHARSET = 'utf8mb4'

    def __init__(
        self,
        host: str,
        port: int,
        user: str,
        password: str,
        database: Optional[str] = None
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.database = database
        self.connection = None

    @classmethod
    def from_config(cls, instance_config: dict[str, Any], database: str) -> "DatabaseConnection":
        """Build a connection from an ``instances`` entry of the config."""
        return cls(
            host=instance_config.get('host', 'localhost'),
            port=instance_config.get('port', cls.DEFAULT_PORT),
            user=instance_config.get('user', ''),
            password=instance_config.get('password', ''),
            database=database
        )

    def __enter__(self) -> "DatabaseConnection":
        """Context manager entry - establish connection."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close connection."""
        self.disconnect()

    def connect(self) -> None:
        """Establish database connection."""
        try:
            self.connection = mysql.connector.connect(
                host=self.host,
                port=self.port,
                user=self.user,
                password=self.password,
                database=self.database,
                charset=self.DEFAULT_CHARSET,
                use_unicode=True
            )
            logging.info(f"Connected to {self.host}:{self.port}/{self.database or 'N/A'}")
        except MySQLError as e:
            logging.error(f"Failed to connect to database: {e}")
            raise

    def disconnect(self) -> None:
        """Close database connection."""
        if self.connection and self.connection.is_connected():
            self.connection.close()
            logging.debug("Database connection closed")

    def execute_query(self, query: str, params: Optional[tuple] = None) -> list[tuple]:
        """Execute a query and return results."""
        cursor = self.connection.cursor()
        try:
            cursor.execute(query, params)
            return cursor.fetchall()
        finally:
            cursor.close()

    def get_tables(self) -> list[str]:
        """Get list of all tables in the current database."""
        results = self.execute_query("SHOW TABLES")
        return [row[0] for row in results]

    def client_connection_string(self) -> str:
        """Connection arguments for the mysql command line client."""
        parts = [
            f"-h{shlex.quote(str(self.host))}",
            f"-u{shlex.quote(str(self.user))}",
            f"--port={shlex.quote(str(self.port))}",
        ]
        if self.password:
            parts.append(f"--password={shlex.quote(str(self.password))}")
        if self.database:
            parts.append(shlex.quote(self.database))
        return ' '.join(parts)

    def client_command(self, client: str = 'mysql') -> str:
        """Full client invocation, e.g. ``mysql -hlocalhost -uroot --port=3306 shop``."""
        return f"{client} {self.client_connection_string()}"


def list_tables(instance_config: dict[str, Any], database: str) -> list[str]:
    """Open a short-lived connection and list the tables of ``database``."""
    with DatabaseConnection.from_config(instance_config, database) as conn:
        return conn.get_tables()
