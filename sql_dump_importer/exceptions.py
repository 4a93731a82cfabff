"""
Exception types for MySQL Dump Importer.
"""


class DumpImportError(Exception):
    """Base class for all import pipeline errors."""


class InvalidInputError(DumpImportError):
    """The dump file to import does not exist."""


class ConfigurationError(DumpImportError):
    """Incompatible options or unusable configuration."""


class UnknownCompressionError(DumpImportError):
    """A compression id that no known scheme answers to."""


class DumpParseError(DumpImportError):
    """An INSERT line that does not have the expected one-line shape."""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        preview = line.rstrip('\r\n')[:120]
        super().__init__(f"Cannot parse INSERT statement on line {line_number}: {preview}")
