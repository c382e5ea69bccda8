"""
# LowC: test_rules.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `rules.py`.
"""

import re
import unittest

from lowc.exceptions import CommittedMutateException, TagConfigException
from lowc.rules import RuleSetBuilder, compile_tag_pattern, expand_template


class TestRules(unittest.TestCase):
    def test_compile_tag_pattern(self):
        self.assertRaises(TagConfigException, compile_tag_pattern, [], True)
        self.assertRaises(TagConfigException, compile_tag_pattern, (), False)

        self.assertEqual(compile_tag_pattern(['d'], is_empty=False).groups, 1)
        self.assertEqual(compile_tag_pattern(['link', 'href'], is_empty=False).groups, 2)
        self.assertEqual(compile_tag_pattern(['tube', 'watch'], is_empty=True).groups, 1)
        self.assertEqual(compile_tag_pattern(['picture', 'src', 'caption'], is_empty=True).groups, 2)

        empty_pattern = compile_tag_pattern(['tube', 'watch'], is_empty=True)
        self.assertEqual(empty_pattern.fullmatch('<tube watch="abc">').groups(), ('abc',))
        self.assertEqual(empty_pattern.fullmatch('<tube watch="abc"/>').groups(), ('abc',))
        self.assertEqual(empty_pattern.fullmatch('<tube  watch="abc" />').groups(), ('abc',))
        self.assertEqual(empty_pattern.fullmatch('<tube\nwatch=""\n>').groups(), ('',))
        self.assertIsNone(empty_pattern.fullmatch('<tube>'))
        self.assertIsNone(empty_pattern.fullmatch('<tubes watch="abc">'))
        self.assertIsNone(empty_pattern.fullmatch('<TUBE watch="abc">'))
        self.assertIsNone(empty_pattern.fullmatch('<tube watch=\'abc\'>'))

        paired_pattern = compile_tag_pattern(['d'], is_empty=False)
        self.assertEqual(paired_pattern.fullmatch('<d>hello</d>').groups(), ('hello',))
        self.assertEqual(paired_pattern.fullmatch('<d >hello</d >').groups(), ('hello',))
        self.assertEqual(paired_pattern.fullmatch('<d></d>').groups(), ('',))
        self.assertEqual(paired_pattern.fullmatch('<d>two\nlines</d>').groups(), ('two\nlines',))
        self.assertEqual(paired_pattern.fullmatch('<d><em>nested</em></d>').groups(), ('<em>nested</em>',))
        self.assertIsNone(paired_pattern.fullmatch('<div>hello</div>'))
        self.assertIsNone(paired_pattern.fullmatch('<d>unclosed'))
        self.assertEqual(
            [match.group(1) for match in paired_pattern.finditer('<d>one</d> and <d>two</d>')],
            ['one', 'two'],
        )

        attribute_order_pattern = compile_tag_pattern(['picture', 'src', 'caption'], is_empty=True)
        self.assertIsNotNone(attribute_order_pattern.fullmatch('<picture src="a.png" caption="A">'))
        self.assertIsNone(attribute_order_pattern.fullmatch('<picture caption="A" src="a.png">'))
        self.assertIsNone(compile_tag_pattern(['picture', 'src'], is_empty=True).fullmatch(
            '<picture src="a.png" caption="A">'
        ))

        special_pattern = compile_tag_pattern(['x.y', 'a+b'], is_empty=True)
        self.assertIsNotNone(special_pattern.fullmatch('<x.y a+b="1">'))
        self.assertIsNone(special_pattern.fullmatch('<xzy aab="1">'))

    def test_expand_template(self):
        match = re.fullmatch('(a)(b)(c)?', 'ab')
        self.assertEqual(expand_template('$2$1', match), 'ba')
        self.assertEqual(expand_template('${1}0', match), 'a0')
        self.assertEqual(expand_template('[$3]', match), '[]')
        self.assertEqual(expand_template('$$1 costs $x', match), '$1 costs $x')
        self.assertEqual(expand_template(r'\1 \n', match), r'\1 \n')

    def test_register(self):
        rule_set_builder = RuleSetBuilder()
        pattern = compile_tag_pattern(['link', 'href'], is_empty=False)

        rule = rule_set_builder.register(pattern, '<a href="$1">$2</a>', shape=['link', 'href'])
        self.assertEqual(rule.tag_name, 'link')
        self.assertEqual(rule.attribute_names, ('href',))
        self.assertFalse(rule.is_empty)
        self.assertEqual(rule.id_, 'link[href]')

        self.assertRaises(TagConfigException, rule_set_builder.register, pattern, '$3')
        self.assertRaises(TagConfigException, rule_set_builder.register, pattern, '${3}')
        self.assertRaises(TagConfigException, rule_set_builder.register, pattern, '$0')
        rule_set_builder.register(pattern, '$$3')

        self.assertRaises(
            TagConfigException,
            rule_set_builder.add_empty_tag, ['picture', 'src'], '<img src="$1" alt="$2">',
        )

    def test_build(self):
        rule_set_builder = RuleSetBuilder()
        rule_set_builder.add_paired_tag(['d'], '<dfn>$1</dfn>')
        rule_set_builder.add_empty_tag(['tube', 'watch'], '$1')

        rules = rule_set_builder.build()
        self.assertIsInstance(rules, tuple)
        self.assertEqual([rule.id_ for rule in rules], ['d', 'tube[watch]/'])
        self.assertRaises(CommittedMutateException, rule_set_builder.add_paired_tag, ['t'], '$1')


if __name__ == '__main__':
    unittest.main()
