"""
# EsHTML: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

LOCALISED_FILE_EXTENSION = '.eshtml'
CANONICAL_FILE_EXTENSION = '.html'

UNKNOWN_TAG = 'unknown-tag'
UNKNOWN_ATTRIBUTE = 'unknown-attribute'
MISMATCHED_CLOSE = 'mismatched-close'
UNCLOSED_TAGS = 'unclosed-tags'

NO_OPENING_TAG_NAME = 'none'

HTML_VOID_ELEMENT_NAMES = frozenset([
    'area',
    'base',
    'br',
    'col',
    'command',
    'embed',
    'hr',
    'img',
    'input',
    'keygen',
    'link',
    'menuitem',
    'meta',
    'param',
    'source',
    'track',
    'wbr',
])

# Accepted in every vocabulary, whether or not the vocabulary lists them.
TECHNICAL_ATTRIBUTE_NAMES = frozenset([
    'action',
    'charset',
    'href',
    'method',
])
