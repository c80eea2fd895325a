"""
# EsHTML: passes.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Substitution passes used by the rewriter.
"""

import abc
import copy
import re

from eshtml.bases import MappingTablePass, SubstitutionPass
from eshtml.placeholders import protect_marker_occurrences, protect_verbatim_regions, unprotect
from eshtml.scanner import (
    ATTRIBUTE_SPECIFICATIONS_REGEX,
    QUOTED_VALUE_REGEX,
    TAG_NAME_BOUNDARY_REGEX,
    TAG_NAME_REGEX,
    TAG_PATTERN_COMPILED,
)


class PassSequence(SubstitutionPass):
    """
    A pass that applies a sequence of passes, in order.
    """
    _passes: list['SubstitutionPass']

    def __init__(self, id_: str, passes: list['SubstitutionPass'], verbose_mode_enabled: bool = False):
        super().__init__(id_, verbose_mode_enabled)
        self._passes = copy.copy(passes)

    @property
    def passes(self) -> list['SubstitutionPass']:
        return copy.copy(self._passes)

    def _apply(self, string: str) -> str:
        for substitution_pass in self._passes:
            string = substitution_pass.apply(string)

        return string


class PlaceholderMarkerPass(SubstitutionPass):
    """
    A pass replacing occurrences of the placeholder marker with a placeholder.

    To be used before VerbatimProtectionPass.
    """
    def _apply(self, string: str) -> str:
        return protect_marker_occurrences(string)


class VerbatimProtectionPass(SubstitutionPass):
    """
    A pass protecting comments, CDATA sections and processing instructions with placeholders.
    """
    def _apply(self, string: str) -> str:
        return protect_verbatim_regions(string)


class PlaceholderUnprotectionPass(SubstitutionPass):
    """
    A pass restoring placeholders to their strings.
    """
    def _apply(self, string: str) -> str:
        return unprotect(string)


class TagNamePass(MappingTablePass):
    """
    A pass substituting tag names.

    Opening, closing and self-closing tags are all handled,
    and the text between the name and the closing bracket is kept as is.
    Matching is case-insensitive; substituted names are written as they appear in the table (lowercase).

    Tags not in the table are consumed unchanged,
    so that tag-like text inside their attribute values is never substituted.
    """
    @staticmethod
    def build_regex_pattern(alternation_regex: str) -> str:
        return fr'''
            <
            (?P<closing_slash> / )?
            (?:
                (?P<name> {alternation_regex} ) {TAG_NAME_BOUNDARY_REGEX}
                    |
                {TAG_NAME_REGEX} {TAG_NAME_BOUNDARY_REGEX}
            )
            (?P<rest> {ATTRIBUTE_SPECIFICATIONS_REGEX} /? > )
        '''

    def substitute_function(self, match: re.Match) -> str:
        name = match.group('name')
        if name is None:
            return match.group()

        closing_slash = match.group('closing_slash') or ''
        substituted_name = self._table.get(name)
        rest = match.group('rest')

        return f'<{closing_slash}{substituted_name}{rest}'


class AttributeSpecificationsPass(MappingTablePass, abc.ABC):
    """
    Base class for a pass confined to the attribute specifications of opening tags.

    Element content, closing tags and protected regions are never altered.
    """
    def _apply(self, string: str) -> str:
        if self._pattern_compiled is None:
            return string

        return TAG_PATTERN_COMPILED.sub(self.substitute_tag_function, string)

    def substitute_tag_function(self, tag_match: re.Match) -> str:
        if tag_match.group('closing_slash') is not None:
            return tag_match.group()

        tag = tag_match.group()
        start = tag_match.start('attribute_specifications') - tag_match.start()
        end = tag_match.end('attribute_specifications') - tag_match.start()
        attribute_specifications = self._pattern_compiled.sub(self.substitute_function, tag[start:end])

        return tag[:start] + attribute_specifications + tag[end:]


class AttributeNamePass(AttributeSpecificationsPass):
    """
    A pass substituting attribute names.

    A name is substituted only as a bare token,
    preceded by whitespace and followed by whitespace, `=`, `>`, `"`, `/` or the end of the tag.
    Values are left untouched (quoted values are skipped over).
    """
    @staticmethod
    def build_regex_pattern(alternation_regex: str) -> str:
        return fr'''
            (?P<quoted> {QUOTED_VALUE_REGEX} )
                |
            (?<= [\s] )
            (?P<name> {alternation_regex} )
            (?= [\s=>"/] | \Z )
        '''

    def substitute_function(self, match: re.Match) -> str:
        name = match.group('name')
        if name is None:
            return match.group()

        return self._table.get(name)


class AttributeValuePass(AttributeSpecificationsPass):
    """
    A pass substituting quoted attribute values.

    A value is substituted when its content, trimmed and case-insensitively, equals a table token.
    Whitespace inside the quotes is discarded; the quote character is kept.
    Values that do not equal a token entirely (e.g. `"Escribe texto aquí"`) are left untouched.
    """
    @staticmethod
    def build_regex_pattern(alternation_regex: str) -> str:
        return fr'''
            (?P<equals> = [\s]* )
            (?:
                (?P<quote> ["'] )
                    [\s]* (?P<value> {alternation_regex} ) [\s]*
                (?P=quote)
                    |
                "[^"]*"
                    |
                '[^']*'
            )
        '''

    def substitute_function(self, match: re.Match) -> str:
        value = match.group('value')
        if value is None:
            return match.group()

        equals = match.group('equals')
        quote = match.group('quote')
        substituted_value = self._table.get(value)

        return f'{equals}{quote}{substituted_value}{quote}'
