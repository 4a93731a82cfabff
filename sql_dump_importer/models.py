"""
Data models and enums for MySQL Dump Importer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .exceptions import ConfigurationError


class ImportStatus(Enum):
    """How an import request was dispatched."""
    COMMAND_ONLY = "command_only"
    SKIPPED = "skipped"
    IMPORTED = "imported"


@dataclass(frozen=True)
class ImportRequest:
    """A single request to import a dump file."""
    source_path: str
    compression: Optional[str] = None
    only_command: bool = False
    only_if_empty: bool = False
    optimize: bool = False

    def __post_init__(self):
        if self.optimize and self.compression:
            raise ConfigurationError("Options --compression and --optimize are not compatible")


@dataclass(frozen=True)
class InsertLine:
    """A parsed single-row INSERT line."""
    table: str
    rows: str


@dataclass
class OptimizeStats:
    """Counters for one optimize pass."""
    statements_in: int = 0
    statements_out: int = 0
    lines_passed: int = 0


@dataclass(frozen=True)
class ImportOutcome:
    """Exit code and combined output of one client invocation."""
    exit_code: int
    output: tuple[str, ...] = field(default_factory=tuple)

    @property
    def failed(self) -> bool:
        return self.exit_code != 0


@dataclass(frozen=True)
class ImportResult:
    """What an import request ended up doing."""
    status: ImportStatus
    command: str
    outcome: Optional[ImportOutcome] = None
