"""
# LowC: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

The built-in tag vocabulary is
````
<d>«content»</d>
<t>«content»</t>
<link href="«url»">«content»</link>
<tube watch="«id»">
<button src="«url»">
<picture src="«url»">
<picture src="«url»" caption="«caption»">
````
where the empty tags may also be written with a closing slash.
"""

from typing import Optional

from lowc.engine import TransformEngine
from lowc.mentions import MentionEntry
from lowc.rules import RuleSet, RuleSetBuilder


def build_standard_rules() -> RuleSet:
    rule_set_builder = RuleSetBuilder()

    rule_set_builder.add_paired_tag(['d'], '<strong><dfn>$1</dfn></strong>')
    rule_set_builder.add_paired_tag(['t'], '<strong><cite>$1</cite></strong>')
    rule_set_builder.add_paired_tag(['link', 'href'], '<a href="$1">$2</a>')

    rule_set_builder.add_empty_tag(['tube', 'watch'], '<iframe src="https://yewtu.be/embed/$1"></iframe>')
    rule_set_builder.add_empty_tag(['button', 'src'], '<img class="button" src="$1" width="88" height="31">')
    rule_set_builder.add_empty_tag(['picture', 'src'], '<figure><img src="$1"></figure>')
    rule_set_builder.add_empty_tag(
        ['picture', 'src', 'caption'],
        '<figure><img src="$1" alt="$2"><figcaption>$2</figcaption></figure>',
    )

    return rule_set_builder.build()


STANDARD_RULES = build_standard_rules()


def lowc_to_html(document: str, mention_entries: Optional[tuple[MentionEntry, ...]] = None,
                 verbose_mode_enabled: bool = False) -> str:
    """
    Convert a LowC document to HTML.

    `mention_entries` of None means no mention configuration is available.
    """
    transform_engine = TransformEngine(STANDARD_RULES, mention_entries, verbose_mode_enabled)
    html = transform_engine.transform(document)

    return html
