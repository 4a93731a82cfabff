"""
Import command composition for MySQL Dump Importer.
"""

from .compression import CompressionScheme


def build_import_command(scheme: CompressionScheme, client_command: str, file_path: str) -> str:
    """Compose the shell command that loads ``file_path`` through ``client_command``."""
    return scheme.decompressing_command(client_command, file_path)
