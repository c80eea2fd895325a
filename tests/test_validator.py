"""
# EsHTML: test_validator.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `validator.py`.
"""

import unittest

from eshtml.constants import MISMATCHED_CLOSE, UNCLOSED_TAGS, UNKNOWN_ATTRIBUTE, UNKNOWN_TAG
from eshtml.spanish import SPANISH_VOCABULARY
from eshtml.validator import TagStackFrame, ValidationError, Validator, unwind_tag_stack
from eshtml.vocabulary import Vocabulary


class TestValidator(unittest.TestCase):
    def setUp(self):
        self.validator = Validator(SPANISH_VOCABULARY)

    def test_validation_error_format(self):
        self.assertEqual(
            ValidationError(UNKNOWN_TAG, 'unknown tag `x`', 2, 3).format(),
            'line 2, column 3: unknown tag `x`',
        )

    def test_valid_sources(self):
        for source in [
            '',
            '   \n\t   ',
            '<div>test</div>',
            '<div><span>test</span></div>',
            '<img/>',
            '<div class="test">content</div>',
            '<artículo>test</artículo>',
            '<div clase="test"></div>',
            '<botón deshabilitado></botón>',
            '<img fte="test.jpg" ta="desc">',
            '<div data-test="value">test</div>',
            '<button aria-label="test">test</button>',
            '<BOTÓN CLASE="x">a</botón>',
            '<!-- <invalido> -->',
            '<![CDATA[<invalido>]]>',
            '''
                <artículo>
                    <título>Test</título>
                    <sección clase="test">
                        <lo>
                            <el>Item 1</el>
                            <el>Item 2</el>
                        </lo>
                    </sección>
                </artículo>
            ''',
            (
                '<eshtml><cuerpo><e1 clase="x">Hola</e1>'
                '<entrada tipo="texto"><img fte="a.png" ta="b"></cuerpo></eshtml>'
            ),
        ]:
            self.assertEqual(self.validator.validate_source(source), [], source)

    def test_unknown_tags(self):
        self.assertEqual(
            self.validator.validate_source('\n  <invalidoTag>\n    test\n  </invalidoTag>'),
            [
                ValidationError(UNKNOWN_TAG, 'unknown tag `invalidoTag`', 2, 3),
                ValidationError(UNKNOWN_TAG, 'unknown tag `invalidoTag`', 4, 3),
            ],
        )
        self.assertEqual(
            self.validator.validate_source('<tagDesconocido/>'),
            [ValidationError(UNKNOWN_TAG, 'unknown tag `tagDesconocido`', 1, 1)],
        )

    def test_unknown_attributes(self):
        self.assertEqual(
            self.validator.validate_source('<p foo="1" clase="x"></p>'),
            [ValidationError(UNKNOWN_ATTRIBUTE, 'unknown attribute `foo` in tag `p`', 1, 1)],
        )
        self.assertEqual(
            self.validator.validate_source('<div>\n<div desconocido></div></div>'),
            [ValidationError(UNKNOWN_ATTRIBUTE, 'unknown attribute `desconocido` in tag `div`', 2, 1)],
        )

    def test_findings_in_source_order(self):
        self.assertEqual(
            self.validator.validate_source('<invalido attr="test"><otro></invalido>'),
            [
                ValidationError(UNKNOWN_TAG, 'unknown tag `invalido`', 1, 1),
                ValidationError(UNKNOWN_ATTRIBUTE, 'unknown attribute `attr` in tag `invalido`', 1, 1),
                ValidationError(UNKNOWN_TAG, 'unknown tag `otro`', 1, 23),
                ValidationError(UNKNOWN_TAG, 'unknown tag `invalido`', 1, 29),
            ],
        )

    def test_technical_attributes(self):
        vocabulary = Vocabulary.build(unchanged_tag_names=['a', 'form'])
        validator = Validator(vocabulary)

        self.assertEqual(validator.validate_source('<a href="#">x</a>'), [])
        self.assertEqual(validator.validate_source('<form action="/x" method="post" charset="utf-8"></form>'), [])
        self.assertEqual(
            validator.validate_source('<a rel="x">x</a>'),
            [ValidationError(UNKNOWN_ATTRIBUTE, 'unknown attribute `rel` in tag `a`', 1, 1)],
        )

    def test_mismatched_close(self):
        self.assertEqual(
            self.validator.validate_source('<div><p>x</div>'),
            [ValidationError(MISMATCHED_CLOSE, 'closing tag `div` does not match opening tag `p`', 1, 10)],
        )
        self.assertEqual(
            self.validator.validate_source('test</div>'),
            [ValidationError(MISMATCHED_CLOSE, 'closing tag `div` does not match opening tag `none`', 1, 5)],
        )
        self.assertEqual(
            self.validator.validate_source('<div>test</span>'),
            [ValidationError(MISMATCHED_CLOSE, 'closing tag `span` does not match opening tag `div`', 1, 10)],
        )

    def test_unclosed_tags(self):
        self.assertEqual(
            self.validator.validate_source('<eshtml><cuerpo>'),
            [ValidationError(UNCLOSED_TAGS, 'unclosed tags: eshtml, cuerpo', 0, 0)],
        )
        self.assertEqual(
            self.validator.validate_source('<div>test'),
            [ValidationError(UNCLOSED_TAGS, 'unclosed tags: div', 0, 0)],
        )

    def test_void_and_self_closing_tags(self):
        self.assertEqual(self.validator.validate_source('<br><hr/><p>x</p>'), [])
        self.assertEqual(self.validator.validate_source('<p><br></p>'), [])
        self.assertEqual(self.validator.validate_source('<p><entrada tipo="texto"></p>'), [])
        self.assertEqual(self.validator.validate_source('<div/><span></span>'), [])

    def test_verbatim_openers_inside_attribute_values(self):
        self.assertEqual(
            self.validator.validate_source('<entrada lugar="escribe <!-- aquí"><botón>x</botón><!-- nota -->'),
            [],
        )
        self.assertEqual(
            self.validator.validate_source('<p clase="<!--">x</p><!-- <invalido> -->'),
            [],
        )

    def test_stray_quotes(self):
        self.assertEqual(self.validator.validate_source("<p clase=l'eau>x</p>"), [])
        self.assertEqual(
            self.validator.validate_source("<p clase=l'eau desconocido>x</p>"),
            [ValidationError(UNKNOWN_ATTRIBUTE, 'unknown attribute `desconocido` in tag `p`', 1, 1)],
        )

    def test_structure_not_checked_after_lexical_findings(self):
        self.assertEqual(
            self.validator.validate_source('<div><invalido></div>'),
            [ValidationError(UNKNOWN_TAG, 'unknown tag `invalido`', 1, 6)],
        )

    def test_unwind_tag_stack(self):
        div_frame = TagStackFrame('div', 'div')
        span_frame = TagStackFrame('span', 'span')
        img_frame = TagStackFrame('img', 'img')

        tag_stack = [div_frame, img_frame]
        self.assertIsNone(unwind_tag_stack(tag_stack, 'div', SPANISH_VOCABULARY))
        self.assertEqual(tag_stack, [])

        tag_stack = [div_frame, span_frame]
        self.assertEqual(unwind_tag_stack(tag_stack, 'div', SPANISH_VOCABULARY), span_frame)
        self.assertEqual(tag_stack, [])

        tag_stack = [span_frame]
        self.assertEqual(unwind_tag_stack(tag_stack, 'div', SPANISH_VOCABULARY), span_frame)
        self.assertEqual(tag_stack, [])

        tag_stack = [div_frame, div_frame, span_frame]
        self.assertEqual(unwind_tag_stack(tag_stack, 'div', SPANISH_VOCABULARY), span_frame)
        self.assertEqual(tag_stack, [div_frame])

        self.assertEqual(unwind_tag_stack([], 'div', SPANISH_VOCABULARY), TagStackFrame('none', 'none'))


if __name__ == '__main__':
    unittest.main()
