"""
# LowC: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re
from typing import Iterable


BACK_REFERENCE_PATTERN_COMPILED = re.compile(
    pattern=r'''
        [$]
        (?:
            (?P<dollar> [$] )
                |
            [{] (?P<braced_index> [0-9]+ ) [}]
                |
            (?P<index> [0-9]+ )
        )
    ''',
    flags=re.ASCII | re.VERBOSE,
)


def compute_back_reference_indices(template: str) -> Iterable[int]:
    """
    Compute the capture indices referenced by a replacement template.

    Back-references are `$«n»` or `${«n»}`; `$$` is a literal dollar sign.
    A `$` followed by anything else is left as is.
    """
    for back_reference_match in BACK_REFERENCE_PATTERN_COMPILED.finditer(template):
        if back_reference_match.group('dollar') is not None:
            continue

        index = back_reference_match.group('braced_index') or back_reference_match.group('index')
        yield int(index)


def escape_attribute_value_html(value: str) -> str:
    """
    Escape an attribute value that will be delimited by double quotes.

    For speed, we make the following assumptions:
    - Entity names are any run of up to 31 letters.
      The longest entity name is `CounterClockwiseContourIntegral`.
    - Decimal code points are any run of up to 7 digits.
    - Hexadecimal code points are any run of up to 6 digits.
    """
    value = re.sub(
        pattern='''
            [&]
            (?!
                (?:
                    [a-zA-Z]{1,31}
                        |
                    [#] (?: [0-9]{1,7} | [xX] [0-9a-fA-F]{1,6} )
                )
                [;]
            )
        ''',
        repl='&amp;',
        string=value,
        flags=re.VERBOSE,
    )
    value = re.sub(pattern='<', repl='&lt;', string=value)
    value = re.sub(pattern='>', repl='&gt;', string=value)
    value = re.sub(pattern='"', repl='&quot;', string=value)

    return value
