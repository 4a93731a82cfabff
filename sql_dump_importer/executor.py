"""
Client process execution for MySQL Dump Importer.
"""

import logging
import subprocess

from .models import ImportOutcome


class ImportExecutor:
    """Runs an import command in a shell and captures its output."""

    def run(self, command: str) -> ImportOutcome:
        """
        Run ``command`` to completion.

        stderr is merged into stdout so the captured lines keep the order in
        which the client produced them. A non-zero exit code is returned, not
        raised.
        """
        logging.debug(f"Executing: {command}")
        output: list[str] = []

        with subprocess.Popen(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors='replace'
        ) as process:
            for line in process.stdout:
                line = line.rstrip('\n')
                logging.debug(f"  {line}")
                output.append(line)
            exit_code = process.wait()

        logging.debug(f"Command exited with code {exit_code}")
        return ImportOutcome(exit_code=exit_code, output=tuple(output))
