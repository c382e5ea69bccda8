"""
# LowC: mentions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Mention configuration.

The mention table is read from a TOML file of the form
````
[«handle»]
site = "«url»"
mention = true | false
````
where `site` is mandatory and `mention` defaults to false.
"""

import os
import re
import sys
from pathlib import Path
from typing import Any, NamedTuple, Optional, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from lowc.constants import CONFIG_DIRECTORY_NAME, MENTION_CLASS_NAME, MENTION_CONFIG_FILE_NAME
from lowc.utilities import escape_attribute_value_html


class MentionEntry(NamedTuple):
    handle: str
    site: str
    mention: bool = False


class MentionTableLoaded(NamedTuple):
    entries: tuple[MentionEntry, ...]


class MentionTableAbsent(NamedTuple):
    reason: str


class MentionEntryError(NamedTuple):
    handle: str
    detail: str


MentionTableResult = Union[MentionTableLoaded, MentionTableAbsent, MentionEntryError]


def compute_config_directory(environment: Optional[dict[str, str]] = None, platform: Optional[str] = None) -> Path:
    """
    Compute the platform configuration directory for LowC.

    - `$XDG_CONFIG_HOME/lowc` if `XDG_CONFIG_HOME` is set
    - `%APPDATA%\\lowc` on Windows
    - `~/.config/lowc` otherwise
    """
    if environment is None:
        environment = dict(os.environ)
    if platform is None:
        platform = sys.platform

    xdg_config_home = environment.get('XDG_CONFIG_HOME')
    if xdg_config_home:
        return Path(xdg_config_home) / CONFIG_DIRECTORY_NAME

    app_data = environment.get('APPDATA')
    if platform == 'win32' and app_data:
        return Path(app_data) / CONFIG_DIRECTORY_NAME

    return Path.home() / '.config' / CONFIG_DIRECTORY_NAME


def compute_default_config_path() -> Path:
    return compute_config_directory() / MENTION_CONFIG_FILE_NAME


def validate_mention_entry(handle: str, value: Any) -> Union[MentionEntry, MentionEntryError]:
    if handle == '':
        return MentionEntryError(handle, 'handle must be non-empty')

    if not isinstance(value, dict):
        return MentionEntryError(handle, 'entry must be a table')

    if 'site' not in value:
        return MentionEntryError(handle, 'missing required field `site`')

    site = value['site']
    if not isinstance(site, str):
        return MentionEntryError(handle, 'field `site` must be a string')

    mention = value.get('mention', False)
    if not isinstance(mention, bool):
        return MentionEntryError(handle, 'field `mention` must be a boolean')

    return MentionEntry(handle, site, mention)


def parse_mention_table(text: str) -> MentionTableResult:
    """
    Parse mention configuration text.

    Text that is not valid TOML counts as absent configuration,
    whereas a single invalid entry fails the whole table.
    """
    try:
        payload = tomllib.loads(text)
    except tomllib.TOMLDecodeError as decode_error:
        return MentionTableAbsent(f'invalid TOML ({decode_error})')

    entries = []
    for handle, value in payload.items():
        entry = validate_mention_entry(handle, value)
        if isinstance(entry, MentionEntryError):
            return entry

        entries.append(entry)

    return MentionTableLoaded(tuple(entries))


def load_mention_table(path: Path) -> MentionTableResult:
    try:
        text = path.read_text(encoding='utf-8')
    except FileNotFoundError:
        return MentionTableAbsent(f'file `{path}` not found')
    except (OSError, UnicodeDecodeError) as read_error:
        return MentionTableAbsent(f'cannot read file `{path}` ({read_error})')

    return parse_mention_table(text)


def build_mention_pattern(entries: tuple[MentionEntry, ...]) -> Optional[re.Pattern]:
    """
    Build a single pattern matching every configured `@«handle»`.

    Longer handles are tried first, and a handle must not be preceded by a word character or `@`
    nor followed by a word character, so that `@alice` never matches part of `@alice2` or `me@alice`.
    """
    handles = sorted({entry.handle for entry in entries}, key=lambda handle: (-len(handle), handle))
    if len(handles) == 0:
        return None

    handles_regex = '|'.join(re.escape(handle) for handle in handles)

    return re.compile(rf'(?<![\w@])@(?P<handle>{handles_regex})(?!\w)')


def build_mention_anchor(entry: MentionEntry) -> str:
    site = escape_attribute_value_html(entry.site)
    handle = escape_attribute_value_html(entry.handle)
    mention = 'true' if entry.mention else 'false'

    return (
        f'<a href="{site}" class="{MENTION_CLASS_NAME}" '
        f'data-handle="{handle}" data-mention="{mention}">@{entry.handle}</a>'
    )
