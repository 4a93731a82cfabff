"""
MySQL Dump Importer
===================
Imports SQL dumps with the mysql command line client, with support for:
- Compressed dumps (gzip, bzip2, xz)
- Batching single-row INSERT statements before import
- Dry runs that only print the import command
- Skipping imports into non-empty databases
"""

from .cli import main
from .command_builder import build_import_command
from .compression import CompressionResolver, CompressionScheme
from .config import ConfigLoader
from .connection import DatabaseConnection
from .exceptions import (
    ConfigurationError,
    DumpImportError,
    DumpParseError,
    InvalidInputError,
    UnknownCompressionError,
)
from .executor import ImportExecutor
from .importer import ImportPolicy
from .models import (
    ImportOutcome,
    ImportRequest,
    ImportResult,
    ImportStatus,
    InsertLine,
    OptimizeStats,
)
from .optimizer import SqlDumpOptimizer
from .utils import setup_logging

__version__ = "1.0.0"

__all__ = [
    # Main entry point
    "main",
    # Core classes
    "CompressionResolver",
    "CompressionScheme",
    "ConfigLoader",
    "DatabaseConnection",
    "ImportExecutor",
    "ImportPolicy",
    "SqlDumpOptimizer",
    "build_import_command",
    # Models
    "ImportOutcome",
    "ImportRequest",
    "ImportResult",
    "ImportStatus",
    "InsertLine",
    "OptimizeStats",
    # Errors
    "ConfigurationError",
    "DumpImportError",
    "DumpParseError",
    "InvalidInputError",
    "UnknownCompressionError",
    # Utilities
    "setup_logging",
]
