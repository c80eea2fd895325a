"""
# EsHTML: rewriter.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Token-substitution rewriting of markup.

The rewriter applies, in order:
1. protection of pre-existing placeholder markers
2. protection of verbatim regions (comments, CDATA sections, processing instructions)
3. the tag-name pass
4. the attribute-name pass
5. the attribute-value pass (forward direction only)
6. restoration of placeholders

The rewriter is total: it never fails, and tokens it does not recognise are passed through unchanged.
Each pass costs O(document length × table size); its pattern is compiled once at construction,
so a rewriter should be built once per vocabulary and reused across documents.
"""

from eshtml.passes import (
    AttributeNamePass,
    AttributeValuePass,
    PassSequence,
    PlaceholderMarkerPass,
    PlaceholderUnprotectionPass,
    TagNamePass,
    VerbatimProtectionPass,
)
from eshtml.vocabulary import Vocabulary


class Rewriter:
    """
    Object rewriting markup from localised to canonical vocabulary (or the reverse).

    In the reverse direction the tag and attribute tables are inverted;
    attribute values are not declared in both directions, so they are never substituted in reverse.
    """
    _vocabulary: Vocabulary
    _reverse_enabled: bool
    _pass_sequence: PassSequence

    def __init__(self, vocabulary: Vocabulary, reverse_enabled: bool = False, verbose_mode_enabled: bool = False):
        if reverse_enabled:
            vocabulary = vocabulary.inverted()

        self._vocabulary = vocabulary
        self._reverse_enabled = reverse_enabled

        passes = [
            PlaceholderMarkerPass('placeholder-markers', verbose_mode_enabled),
            VerbatimProtectionPass('verbatim-protect', verbose_mode_enabled),
            TagNamePass('tag-names', vocabulary.tag_table, verbose_mode_enabled),
            AttributeNamePass('attribute-names', vocabulary.attribute_table, verbose_mode_enabled),
        ]
        if not reverse_enabled:
            passes.append(
                AttributeValuePass('attribute-values', vocabulary.attribute_value_table, verbose_mode_enabled)
            )
        passes.append(PlaceholderUnprotectionPass('placeholder-unprotect', verbose_mode_enabled))

        self._pass_sequence = PassSequence('rewrite', passes)

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    @property
    def reverse_enabled(self) -> bool:
        return self._reverse_enabled

    @property
    def pass_ids(self) -> list[str]:
        return [substitution_pass.id_ for substitution_pass in self._pass_sequence.passes]

    def rewrite(self, source: str) -> str:
        return self._pass_sequence.apply(source)
