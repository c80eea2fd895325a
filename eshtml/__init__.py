"""
# EsHTML

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Rewrite HTML written with Spanish tag and attribute names into standard HTML, and back.
"""

from eshtml._version import __version__
from eshtml.core import Transpiler, reverse_transpile, transpile, validate_source
from eshtml.exceptions import InconsistentMappingException, ValidationFailedException, ValidationWarning
from eshtml.rewriter import Rewriter
from eshtml.spanish import SPANISH_VOCABULARY
from eshtml.validator import ValidationError, Validator
from eshtml.vocabulary import MappingTable, Vocabulary

__all__ = [
    '__version__',
    'InconsistentMappingException',
    'MappingTable',
    'Rewriter',
    'SPANISH_VOCABULARY',
    'Transpiler',
    'ValidationError',
    'ValidationFailedException',
    'ValidationWarning',
    'Validator',
    'Vocabulary',
    'reverse_transpile',
    'transpile',
    'validate_source',
]
