"""
Dump optimization for MySQL Dump Importer.

Rewrites runs of single-row INSERT lines for the same table into one
multi-row INSERT statement.
"""

import logging
import os
import re
import tempfile
from typing import Optional, TextIO

from .exceptions import DumpParseError
from .models import InsertLine, OptimizeStats


class SqlDumpOptimizer:
    """Streams a dump line by line and batches consecutive INSERTs."""

    INSERT_PREFIX = 'insert into'
    INSERT_PATTERN = re.compile(
        r'^insert into `([^`]+)` \(.*?\) values (.*);\s*$',
        re.IGNORECASE | re.DOTALL
    )

    FILE_ENCODING = 'utf-8'
    FILE_ERRORS = 'surrogateescape'

    def __init__(self, temp_dir: Optional[str] = None, terminate_final_statement: bool = True):
        self.temp_dir = temp_dir
        self.terminate_final_statement = terminate_final_statement
        self.last_stats = OptimizeStats()

    def classify_line(self, line: str, line_number: int = 0) -> Optional[InsertLine]:
        """
        Classify a dump line.

        Returns None for lines that do not start with ``insert into``.
        Raises DumpParseError for lines that do but lack the
        ``insert into `table` (columns) values rows;`` shape.
        """
        if line[:len(self.INSERT_PREFIX)].lower() != self.INSERT_PREFIX:
            return None

        match = self.INSERT_PATTERN.match(line)
        if not match:
            raise DumpParseError(line_number, line)
        return InsertLine(table=match.group(1), rows=match.group(2))

    def optimize(self, source_path: str) -> str:
        """
        Write a batched copy of a dump to a new temporary file.

        Args:
            source_path: Path of the plain-text dump to read.

        Returns:
            Path of the rewritten dump. The caller owns and must delete it.
        """
        with open(source_path, 'r', encoding=self.FILE_ENCODING,
                  errors=self.FILE_ERRORS, newline='') as source:
            fd, result_path = tempfile.mkstemp(prefix='dump', suffix='.sql', dir=self.temp_dir)
            try:
                with open(fd, 'w', encoding=self.FILE_ENCODING,
                          errors=self.FILE_ERRORS, newline='') as target:
                    self.last_stats = self._rewrite(source, target)
            except BaseException:
                os.unlink(result_path)
                raise

        logging.info(
            f"Optimized {self.last_stats.statements_in} INSERT statement(s) "
            f"into {self.last_stats.statements_out}"
        )
        logging.debug(f"Optimized dump written to {result_path}")
        return result_path

    def _rewrite(self, source: TextIO, target: TextIO) -> OptimizeStats:
        """Run the batching state machine from ``source`` into ``target``."""
        stats = OptimizeStats()
        current_table: Optional[str] = None

        for line_number, line in enumerate(source, start=1):
            insert = self.classify_line(line, line_number)

            if insert is None:
                if current_table is not None:
                    target.write(";\n")
                    current_table = None
                target.write(line)
                stats.lines_passed += 1
                continue

            stats.statements_in += 1
            if insert.table == current_table:
                target.write(',' + insert.rows)
                continue

            if current_table is not None:
                target.write(";\n\n")
            target.write(f"INSERT INTO `{insert.table}` VALUES {insert.rows}")
            current_table = insert.table
            stats.statements_out += 1

        if current_table is not None and self.terminate_final_statement:
            target.write(";\n")

        return stats
