#!/usr/bin/env python3
"""
MySQL Dump Importer - CLI Entry Point
=====================================
Imports an SQL dump with the mysql command line client into the database
defined in the configuration file, with support for:
- Compressed dumps (gzip, bzip2, xz)
- Batching single-row INSERTs before import (--optimize)
- Printing the import command without running it (--only-command)
- Skipping the import when the database already has tables (--only-if-empty)
"""

import argparse
import logging
import sys

import yaml

from .compression import CompressionResolver
from .config import ConfigLoader
from .connection import DatabaseConnection, list_tables
from .exceptions import DumpImportError
from .importer import ImportPolicy
from .models import ImportRequest, ImportStatus
from .optimizer import SqlDumpOptimizer
from .utils import compression_help, exit_code_for, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='MySQL Dump Importer - Imports a dump with the mysql client '
                    'into the database defined in the configuration file',
        epilog=compression_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        'filename',
        nargs='?',
        help='Dump filename'
    )
    parser.add_argument(
        '-C', '--compression',
        help='The compression of the specified file'
    )
    parser.add_argument(
        '--only-command',
        action='store_true',
        help='Print only mysql command. Do not execute'
    )
    parser.add_argument(
        '--only-if-empty',
        action='store_true',
        help='Imports only if database is empty'
    )
    parser.add_argument(
        '--optimize',
        action='store_true',
        help='Convert verbose INSERTs to short ones before import (not working with compression)'
    )
    parser.add_argument(
        '-c', '--config',
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '-i', '--instance',
        help='Import into this instance instead of the configured one'
    )
    parser.add_argument(
        '-d', '--database',
        help='Import into this database instead of the configured one'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.filename:
        parser.error('the following arguments are required: filename')

    # Load configuration
    try:
        config = ConfigLoader(args.config)
    except FileNotFoundError:
        print(f"Error: Configuration file '{args.config}' not found")
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"Error: Invalid YAML in configuration file: {e}")
        sys.exit(1)

    # Setup logging
    log_settings = config.get_logging_settings()
    if args.verbose:
        log_settings['level'] = 'DEBUG'
    setup_logging(log_settings)

    try:
        request = ImportRequest(
            source_path=args.filename,
            compression=args.compression,
            only_command=args.only_command,
            only_if_empty=args.only_if_empty,
            optimize=args.optimize
        )

        settings = config.get_import_settings()
        instance, database = config.resolve_target(args.instance, args.database)
        connection = DatabaseConnection.from_config(instance, database)

        policy = ImportPolicy(
            client_command=connection.client_command(settings.get('client', ConfigLoader.DEFAULT_CLIENT)),
            table_lister=lambda: list_tables(instance, database),
            database=database,
            resolver=CompressionResolver(use_pipe_viewer=settings.get('pipe_viewer', False)),
            optimizer=SqlDumpOptimizer(
                terminate_final_statement=settings.get('terminate_final_statement', True)
            )
        )
        result = policy.run(request)

    except DumpImportError as e:
        logging.error(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        logging.error(f"Fatal error: {e}")
        sys.exit(1)

    if result.status == ImportStatus.COMMAND_ONLY:
        print(result.command)

    sys.exit(exit_code_for(result))


if __name__ == '__main__':
    main()
