"""
Utility functions for MySQL Dump Importer.
"""

import logging
import sys
from pathlib import Path
from typing import Any

from .compression import CompressionResolver
from .models import ImportResult, ImportStatus


def setup_logging(log_settings: dict[str, Any]) -> None:
    """Setup logging configuration."""
    log_level = getattr(logging, log_settings.get('level', 'INFO').upper())
    log_file = log_settings.get('file')

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def compression_help() -> str:
    """Describe the supported compressions for the CLI help text."""
    lines = ["Compression option", "  Supported compression: " + ', '.join(CompressionResolver.supported())]
    lines.append("  Aliases: " + ', '.join(
        f"{alias}={scheme.id}"
        for alias, scheme in sorted(CompressionResolver.SCHEMES.items())
        if alias != scheme.id
    ))
    return '\n'.join(lines)


def exit_code_for(result: ImportResult) -> int:
    """Process exit code for a finished import request."""
    if result.status == ImportStatus.IMPORTED and result.outcome.failed:
        return result.outcome.exit_code if result.outcome.exit_code > 0 else 1
    return 0
