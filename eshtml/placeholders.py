"""
# EsHTML: placeholders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Placeholder protection of verbatim regions.

Comments, CDATA sections and processing instructions must come out of the rewriter byte-identical,
even where their text happens to contain localised tags or attributes.
Before any substitution pass runs, each such region is replaced by a placeholder
of the form `«marker»«run_characters»«marker»`, where «marker» is `U+F8FF`
and «run_characters» are between `U+E000` and `U+E0FF`, each representing a UTF-8 byte of the region.
Placeholders contain no `<`, quote, whitespace or letter, so no pass can match inside one.

Occurrences of «marker» already present in the source are protected first (`protect_marker_occurrences`),
so that restoring placeholders (`unprotect`) gives back exactly the original text.
"""

import re
import warnings

from eshtml.scanner import SCANNER_PATTERN_COMPILED

MARKER = '\uF8FF'
RUN_CHARACTER_MIN = '\uE000'
RUN_CHARACTER_MAX = '\uE0FF'
REPLACEMENT_CHARACTER = '\uFFFD'

RUN_CODE_POINT_MIN = ord(RUN_CHARACTER_MIN)

PLACEHOLDER_PATTERN_COMPILED = re.compile(
    pattern=f'{MARKER} (?P<run_characters> [{RUN_CHARACTER_MIN}-{RUN_CHARACTER_MAX}]* ) {MARKER}',
    flags=re.VERBOSE,
)


def protect(string: str) -> str:
    """
    Convert a string to a placeholder.

    Placeholders already inside the string are restored first, so placeholders never nest.
    """
    string = unprotect(string)
    run_characters = ''.join(
        chr(RUN_CODE_POINT_MIN + byte)
        for byte in string.encode()
    )

    return f'{MARKER}{run_characters}{MARKER}'


def protect_marker_occurrences(string: str) -> str:
    return string.replace(MARKER, protect(MARKER))


def protect_verbatim_regions(string: str) -> str:
    """
    Protect verbatim regions found by the scanner.

    Tags are matched too, and kept as they are,
    so that `<!--` or `<?` inside a quoted attribute value never starts a region.
    """
    return SCANNER_PATTERN_COMPILED.sub(protect_scanner_match, string)


def protect_scanner_match(scanner_match: re.Match) -> str:
    if scanner_match.group('verbatim_region') is None:
        return scanner_match.group()

    return protect(scanner_match.group())


def restore_placeholder(placeholder_match: re.Match) -> str:
    run_characters = placeholder_match.group('run_characters')
    string_bytes = bytes(ord(character) - RUN_CODE_POINT_MIN for character in run_characters)

    try:
        return string_bytes.decode()
    except UnicodeDecodeError:
        warnings.warn(
            f'warning: placeholder encountered with run characters '
            f'representing invalid byte sequence {string_bytes}; '
            f'substituted with U+{ord(REPLACEMENT_CHARACTER):X} REPLACEMENT CHARACTER'
        )
        return REPLACEMENT_CHARACTER


def unprotect(string: str) -> str:
    """
    Restore placeholders to the strings they protect.
    """
    return PLACEHOLDER_PATTERN_COMPILED.sub(restore_placeholder, string)
