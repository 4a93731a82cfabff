"""
Import orchestration for MySQL Dump Importer.
"""

import logging
import os
from typing import Callable, Optional, Sequence

from .command_builder import build_import_command
from .compression import CompressionResolver
from .exceptions import ConfigurationError, InvalidInputError
from .executor import ImportExecutor
from .models import ImportRequest, ImportResult, ImportStatus
from .optimizer import SqlDumpOptimizer


class ImportPolicy:
    """Validates, optionally optimizes, and dispatches a dump import."""

    def __init__(
        self,
        client_command: str,
        table_lister: Callable[[], Sequence[str]],
        database: str = "",
        resolver: Optional[CompressionResolver] = None,
        optimizer: Optional[SqlDumpOptimizer] = None,
        executor: Optional[ImportExecutor] = None
    ):
        self.client_command = client_command
        self.table_lister = table_lister
        self.database = database
        self.resolver = resolver or CompressionResolver()
        self.optimizer = optimizer or SqlDumpOptimizer()
        self.executor = executor or ImportExecutor()

    def run(self, request: ImportRequest) -> ImportResult:
        """
        Import the dump described by ``request``.

        The optimized temporary file, if one was written, is removed before
        this method returns or raises.

        Raises:
            InvalidInputError: The dump file does not exist.
            ConfigurationError: Both optimize and compression were requested.
            UnknownCompressionError: The compression id is not supported.
            DumpParseError: An INSERT line could not be optimized.
        """
        file_path = self._check_filename(request.source_path)
        temp_path = None

        if request.optimize:
            if request.compression:
                raise ConfigurationError("Options --compression and --optimize are not compatible")
            logging.info(f"Optimizing {file_path} to temporary file")
            temp_path = self.optimizer.optimize(file_path)
            file_path = temp_path

        try:
            scheme = self.resolver.resolve(request.compression)
            command = build_import_command(scheme, self.client_command, file_path)
            if request.only_command and temp_path is not None:
                logging.warning(f"{temp_path} is temporary and is removed before the command is returned")
            return self._dispatch(request, command, file_path)
        finally:
            if temp_path is not None:
                self._remove_temporary(temp_path)

    def _check_filename(self, source_path: str) -> str:
        if not source_path or not os.path.isfile(source_path):
            raise InvalidInputError(f"File does not exist: {source_path}")
        return source_path

    def _dispatch(self, request: ImportRequest, command: str, file_path: str) -> ImportResult:
        if request.only_command:
            return ImportResult(status=ImportStatus.COMMAND_ONLY, command=command)

        if request.only_if_empty:
            tables = self.table_lister()
            if len(tables) > 0:
                logging.warning(f"Skip import. Database is not empty ({len(tables)} table(s))")
                return ImportResult(status=ImportStatus.SKIPPED, command=command)

        logging.info(f"Importing SQL dump {file_path} to database {self.database or 'N/A'}")
        outcome = self.executor.run(command)
        if outcome.failed:
            logging.error('\n'.join(outcome.output))
        logging.info("Finished")

        return ImportResult(status=ImportStatus.IMPORTED, command=command, outcome=outcome)

    def _remove_temporary(self, temp_path: str) -> None:
        try:
            os.unlink(temp_path)
            logging.debug(f"Removed temporary file {temp_path}")
        except FileNotFoundError:
            logging.warning(f"Temporary file already removed: {temp_path}")
