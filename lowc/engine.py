"""
# LowC: engine.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The transform engine.

A document passes through three stages, in order:
1. header injection (after the first `<head>`)
2. mention substitution (skipped if there is no mention configuration)
3. tag substitution (each rule in registration order)

Each stage scans the whole document as left by the previous stage.
A rule never re-matches its own output, but a later rule may match it.
"""

import re
import sys
from typing import Callable, Optional

from lowc.constants import HEAD_OPENING_TAG, HEADER_BLOCK, VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from lowc.mentions import MentionEntry, build_mention_anchor, build_mention_pattern
from lowc.rules import RuleSet, TagRule, expand_template


def inject_header(document: str) -> str:
    index = document.find(HEAD_OPENING_TAG)
    if index < 0:
        return document

    insertion_index = index + len(HEAD_OPENING_TAG)

    return document[:insertion_index] + HEADER_BLOCK + document[insertion_index:]


def replace_mentions(document: str, mention_entries: Optional[tuple[MentionEntry, ...]]) -> str:
    """
    Replace configured `@«handle»` tokens with mention anchors.

    `None` means there is no mention configuration, and the document is returned unchanged.
    """
    if mention_entries is None:
        return document

    mention_pattern = build_mention_pattern(mention_entries)
    if mention_pattern is None:
        return document

    anchor_from_handle = {
        entry.handle: build_mention_anchor(entry)
        for entry in mention_entries
    }

    def substitute_function(match: re.Match) -> str:
        return anchor_from_handle[match.group('handle')]

    return mention_pattern.sub(substitute_function, document)


def build_substitute_function(rule: TagRule) -> Callable[[re.Match], str]:
    def substitute_function(match: re.Match) -> str:
        return expand_template(rule.template, match)

    return substitute_function


def replace_tag(document: str, rule: TagRule) -> str:
    return rule.pattern.sub(build_substitute_function(rule), document)


def replace_tags(document: str, rules: RuleSet) -> str:
    for rule in rules:
        document = replace_tag(document, rule)

    return document


class TransformEngine:
    """
    Object applying the full pipeline to a document.

    The rule set and mention entries are fixed at construction and never mutated.
    In verbose mode, every pass prints the document before and after to stderr.
    """
    _rules: RuleSet
    _mention_entries: Optional[tuple[MentionEntry, ...]]
    _verbose_mode_enabled: bool

    def __init__(self, rules: RuleSet, mention_entries: Optional[tuple[MentionEntry, ...]] = None,
                 verbose_mode_enabled: bool = False):
        self._rules = rules
        self._mention_entries = mention_entries
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def rules(self) -> RuleSet:
        return self._rules

    @property
    def mention_entries(self) -> Optional[tuple[MentionEntry, ...]]:
        return self._mention_entries

    def transform(self, document: str) -> str:
        if self._verbose_mode_enabled:
            pass_ids = ['#header', '#mentions'] + [f'#{rule.id_}' for rule in self._rules]
            print(f'Pass queue: {pass_ids}\n\n\n\n', file=sys.stderr)

        document = self._apply('header', inject_header, document)
        document = self._apply('mentions', lambda string: replace_mentions(string, self._mention_entries), document)
        for rule in self._rules:
            document = self._apply(rule.id_, lambda string: replace_tag(string, rule), document)

        return document

    def _apply(self, id_: str, pass_function: Callable[[str], str], string: str) -> str:
        string_before = string
        string_after = pass_function(string)

        if self._verbose_mode_enabled:
            if string_before == string_after:
                no_change_indicator = ' (no change)'
            else:
                no_change_indicator = ''

            print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{id_}', file=sys.stderr)
            print(string_before, file=sys.stderr)
            print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator, file=sys.stderr)
            print(string_after, file=sys.stderr)
            print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{id_}', file=sys.stderr)
            print('\n\n\n\n', file=sys.stderr)

        return string_after
