"""
# LowC: rules.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Compilation of tag shapes into tag replacement rules.

A tag shape is a sequence
````
(«tag_name», «attribute_name», [...])
````
where the attribute names must appear in the source tag in exactly that order.
An empty (self-closing) tag is matched as
````
<«tag_name» «attribute_name»="«value»" [...] />
````
(the slash being optional), and a paired tag as
````
<«tag_name» «attribute_name»="«value»" [...]>«content»</«tag_name»>
````
where «content» may span several lines and ends at the first closing tag.
"""

import re
from typing import NamedTuple, Sequence

from lowc.exceptions import CommittedMutateException, TagConfigException
from lowc.utilities import BACK_REFERENCE_PATTERN_COMPILED, compute_back_reference_indices


class TagRule(NamedTuple):
    tag_name: str
    attribute_names: tuple[str, ...]
    is_empty: bool
    pattern: re.Pattern
    template: str

    @property
    def id_(self) -> str:
        attribute_suffix = ''.join(f'[{attribute_name}]' for attribute_name in self.attribute_names)
        kind_suffix = '/' if self.is_empty else ''
        return f'{self.tag_name}{attribute_suffix}{kind_suffix}'


RuleSet = tuple[TagRule, ...]


def compile_tag_pattern(shape: Sequence[str], is_empty: bool) -> re.Pattern:
    """
    Compile a tag shape into a pattern.

    Capture groups are the attribute values in declaration order,
    followed (for paired tags) by the content.
    """
    if len(shape) == 0:
        raise TagConfigException('error: tag shape must contain at least a tag name')

    tag_name, *attribute_names = shape
    tag_name_regex = re.escape(tag_name)

    attributes_regex = ''.join(
        rf'\s+{re.escape(attribute_name)}="([^"]*?)"'
        for attribute_name in attribute_names
    )

    if is_empty:
        ending_regex = r'\s*/?>'
        flags = 0
    else:
        ending_regex = rf'\s*>(.*?)</{tag_name_regex}\s*>'
        flags = re.DOTALL

    return re.compile(f'<{tag_name_regex}{attributes_regex}{ending_regex}', flags=flags)


def expand_template(template: str, match: re.Match) -> str:
    """
    Expand the back-references of a replacement template using a match.

    Unlike `match.expand`, backslashes in the template are not special.
    """
    def substitute_function(back_reference_match: re.Match) -> str:
        if back_reference_match.group('dollar') is not None:
            return '$'

        index = back_reference_match.group('braced_index') or back_reference_match.group('index')

        return match.group(int(index)) or ''

    return BACK_REFERENCE_PATTERN_COMPILED.sub(substitute_function, template)


class RuleSetBuilder:
    """
    Object accumulating tag replacement rules in registration order.

    Rules are applied in the order registered.
    Once `build()` has been called, no further rules may be registered.
    """
    _rules: list['TagRule']
    _is_committed: bool

    def __init__(self):
        self._rules = []
        self._is_committed = False

    def add_paired_tag(self, shape: Sequence[str], template: str) -> 'TagRule':
        return self.register(compile_tag_pattern(shape, is_empty=False), template, shape=shape, is_empty=False)

    def add_empty_tag(self, shape: Sequence[str], template: str) -> 'TagRule':
        return self.register(compile_tag_pattern(shape, is_empty=True), template, shape=shape, is_empty=True)

    def register(self, pattern: re.Pattern, template: str,
                 shape: Sequence[str] = (), is_empty: bool = False) -> 'TagRule':
        if self._is_committed:
            raise CommittedMutateException('error: cannot call `register(...)` after `build()`')

        for index in compute_back_reference_indices(template):
            if index < 1 or index > pattern.groups:
                raise TagConfigException(
                    f'error: template `{template}` references capture ${index}, '
                    f'but pattern `{pattern.pattern}` declares {pattern.groups} capture(s)'
                )

        if len(shape) > 0:
            tag_name, *attribute_names = shape
        else:
            tag_name, attribute_names = pattern.pattern, []

        rule = TagRule(tag_name, tuple(attribute_names), is_empty, pattern, template)
        self._rules.append(rule)

        return rule

    def build(self) -> RuleSet:
        self._is_committed = True
        return tuple(self._rules)
