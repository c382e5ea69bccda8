"""
# LowC: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from lowc._version import __version__
from lowc.constants import COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE
from lowc.core import lowc_to_html
from lowc.mentions import (
    MentionEntry,
    MentionEntryError,
    MentionTableAbsent,
    compute_default_config_path,
    load_mention_table,
)

DESCRIPTION = '''
    Convert LowC custom tags to HTML (written to stdout).
'''
PATH_HELP = '''
    name of file to be converted
    (omit, or use `-`, to read from stdin)
'''
CONFIG_HELP = '''
    mention configuration file
    (defaults to `mentions.toml` in the platform configuration directory)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every pass applied to stderr)
'''


def is_stdin_argument(path_argument: Optional[str]) -> bool:
    return path_argument is None or path_argument == '-'


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-c', '--config',
        dest='config_path',
        default=None,
        help=CONFIG_HELP,
        metavar='mentions.toml',
        type=Path,
    )
    argument_parser.add_argument(
        'path_argument',
        default=None,
        help=PATH_HELP,
        metavar='path',
        nargs='?',
    )

    return argument_parser.parse_args(arguments)


def read_document(path_argument: Optional[str]) -> str:
    if is_stdin_argument(path_argument):
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError) as read_error:
            print(f'error: cannot read from stdin ({read_error})', file=sys.stderr)
            sys.exit(GENERIC_ERROR_EXIT_CODE)

    try:
        with open(path_argument, 'r', encoding='utf-8') as document_file:
            return document_file.read()
    except FileNotFoundError:
        print(f'error: argument `{path_argument}`: file not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except (OSError, UnicodeDecodeError) as read_error:
        print(f'error: argument `{path_argument}`: cannot read file ({read_error})', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)


def read_mention_entries(config_path: Optional[Path],
                         verbose_mode_enabled: bool) -> Optional[tuple[MentionEntry, ...]]:
    """
    Read the mention entries, or None if there is no usable configuration.

    An invalid entry is fatal.
    """
    if config_path is None:
        config_path = compute_default_config_path()

    mention_table = load_mention_table(config_path)

    if isinstance(mention_table, MentionEntryError):
        print(
            f'error: mention configuration `{config_path}`: '
            f'handle `{mention_table.handle}`: {mention_table.detail}',
            file=sys.stderr,
        )
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    if isinstance(mention_table, MentionTableAbsent):
        if verbose_mode_enabled:
            print(f'note: no mention configuration: {mention_table.reason}', file=sys.stderr)
        return None

    return mention_table.entries


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    path_argument = parsed_arguments.path_argument
    config_path = parsed_arguments.config_path
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    document = read_document(path_argument)
    mention_entries = read_mention_entries(config_path, verbose_mode_enabled)

    html = lowc_to_html(document, mention_entries, verbose_mode_enabled)
    print(html)


if __name__ == '__main__':
    main()
