"""
# EsHTML: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

EsHTML is converted as
````
validate → (abort or warn) → rewrite
````
In strict mode, any validation finding aborts the conversion before rewriting,
by raising ValidationFailedException.
Otherwise findings are published as a ValidationWarning (unless ignored)
and the document is rewritten regardless, unrecognised tokens being passed through unchanged.
"""

import warnings
from typing import Optional

from eshtml.exceptions import ValidationFailedException, ValidationWarning
from eshtml.rewriter import Rewriter
from eshtml.spanish import SPANISH_VOCABULARY
from eshtml.validator import ValidationError, Validator
from eshtml.vocabulary import Vocabulary


class Transpiler:
    """
    Object governing validation and rewriting for one vocabulary.

    Holds no state that changes between documents,
    so one instance may serve any number of documents.
    """
    _vocabulary: Vocabulary
    _validator: Validator
    _forward_rewriter: Rewriter
    _reverse_rewriter: Rewriter

    def __init__(self, vocabulary: Vocabulary = SPANISH_VOCABULARY, verbose_mode_enabled: bool = False):
        self._vocabulary = vocabulary
        self._validator = Validator(vocabulary)
        self._forward_rewriter = Rewriter(vocabulary, reverse_enabled=False,
                                          verbose_mode_enabled=verbose_mode_enabled)
        self._reverse_rewriter = Rewriter(vocabulary, reverse_enabled=True,
                                          verbose_mode_enabled=verbose_mode_enabled)

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    def validate_source(self, source: str) -> list[ValidationError]:
        return self._validator.validate_source(source)

    def transpile(self, source: str, strict_mode: bool = False, ignore_warnings: bool = False) -> str:
        """
        Convert localised markup to canonical markup.
        """
        errors = self._validator.validate_source(source)

        if len(errors) > 0:
            if strict_mode:
                raise ValidationFailedException(errors)

            if not ignore_warnings:
                warnings.warn(ValidationWarning(errors), stacklevel=2)

        return self._forward_rewriter.rewrite(source)

    def reverse_transpile(self, source: str) -> str:
        """
        Convert canonical markup back to localised markup.

        Canonical markup is not validated, since the validator only knows localised vocabulary.
        """
        return self._reverse_rewriter.rewrite(source)


_default_transpiler: Optional[Transpiler] = None


def get_default_transpiler() -> Transpiler:
    global _default_transpiler

    if _default_transpiler is None:
        _default_transpiler = Transpiler()

    return _default_transpiler


def validate_source(source: str) -> list[ValidationError]:
    return get_default_transpiler().validate_source(source)


def transpile(source: str, strict_mode: bool = False, ignore_warnings: bool = False) -> str:
    return get_default_transpiler().transpile(source, strict_mode, ignore_warnings)


def reverse_transpile(source: str) -> str:
    return get_default_transpiler().reverse_transpile(source)
