"""
# EsHTML: scanner.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Lexical scanner for tags and attributes.

The scanner makes a single linear pass over the source, producing tag occurrences
with offsets into the original source.
Verbatim regions (comments, CDATA sections and processing instructions) are skipped as a whole,
so tags written inside them are never reported.
A verbatim region only starts outside of a tag:
`<!--` inside a quoted attribute value is part of that value.

A tag name starts with a letter of any alphabet (so `título` and `sección` are names)
and continues with letters, digits, underscores or hyphens.
The character after the name must be whitespace, `/` or `>`,
so that a name is never taken to be a prefix of a longer name.

A quote opens a quoted value only straight after `=` (give or take whitespace);
any other quote (e.g. the apostrophe in `title=l'eau`) is an ordinary character.
"""

import re
from typing import Iterator, NamedTuple

VERBATIM_REGION_REGEX = r'''
    <!-- [\s\S]*? -->
        |
    <!\[CDATA\[ [\s\S]*? \]\]>
        |
    <\? [\s\S]*? \?>
'''
TAG_NAME_REGEX = r'[^\W\d_] [\w-]*'
TAG_NAME_BOUNDARY_REGEX = r'(?= [\s/>] )'
QUOTED_VALUE_REGEX = r'''= [\s]* (?: "[^"]*" | '[^']*' )'''
ATTRIBUTE_SPECIFICATIONS_REGEX = fr'''
    (?:
        {QUOTED_VALUE_REGEX}
            |
        (?! = [\s]* ["'] ) [^>]
    )*?
'''
TAG_REGEX = fr'''
    <
    (?P<closing_slash> / )?
    (?P<name> {TAG_NAME_REGEX} )
    {TAG_NAME_BOUNDARY_REGEX}
    (?P<attribute_specifications> {ATTRIBUTE_SPECIFICATIONS_REGEX} )
    (?P<self_closing_slash> / )?
    >
'''
ATTRIBUTE_REGEX = r'''
    (?P<name> [^\s"'<>/=]+ )
    (?:
        [\s]* = [\s]*
        (?:
            "[^"]*"
                |
            '[^']*'
                |
            (?: [^\s"'<>=] [^\s<>]* )?
        )
    )?
        |
    "[^"]*"
        |
    '[^']*'
'''

TAG_PATTERN_COMPILED = re.compile(pattern=TAG_REGEX, flags=re.VERBOSE)
SCANNER_PATTERN_COMPILED = re.compile(
    pattern=fr'(?P<verbatim_region> {VERBATIM_REGION_REGEX} ) | {TAG_REGEX}',
    flags=re.VERBOSE,
)
ATTRIBUTE_PATTERN_COMPILED = re.compile(pattern=ATTRIBUTE_REGEX, flags=re.VERBOSE)


class TagOccurrence(NamedTuple):
    name: str
    normalised_name: str
    attribute_specifications: str
    is_closing: bool
    is_self_closing: bool
    offset: int

    @property
    def is_opening(self) -> bool:
        return not self.is_closing


class AttributeOccurrence(NamedTuple):
    name: str
    normalised_name: str


def scan_tags(source: str) -> Iterator[TagOccurrence]:
    for scanner_match in SCANNER_PATTERN_COMPILED.finditer(source):
        if scanner_match.group('verbatim_region') is not None:
            continue

        name = scanner_match.group('name')
        yield TagOccurrence(
            name=name,
            normalised_name=name.lower(),
            attribute_specifications=scanner_match.group('attribute_specifications'),
            is_closing=scanner_match.group('closing_slash') is not None,
            is_self_closing=scanner_match.group('self_closing_slash') is not None,
            offset=scanner_match.start(),
        )


def scan_attributes(attribute_specifications: str) -> Iterator[AttributeOccurrence]:
    """
    Scan the attribute specifications of a tag.

    Values are consumed along with their names, and never reported.
    A quoted string without a name is skipped, lest its content be mistaken for attribute names.
    """
    for attribute_match in ATTRIBUTE_PATTERN_COMPILED.finditer(attribute_specifications):
        name = attribute_match.group('name')
        if name is None:
            continue

        yield AttributeOccurrence(name=name, normalised_name=name.lower())
