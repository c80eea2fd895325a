"""
# EsHTML: validator.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Validation of localised markup before rewriting.

Validation is done in a fixed order:
1. Verbatim regions are skipped by the scanner (their content is never validated).
2. Every tag name must be known to the vocabulary, either as a localised token or as an unchanged name.
3. Every attribute name of an opening tag must be known to the vocabulary,
   or be one of the always-accepted technical attributes.
4. Only if steps 2 and 3 found nothing, the nesting of tags is checked with a stack.

Gating the structural check avoids cascading noise:
a document full of unrecognised tags does not also get spurious nesting errors.

The validator never raises; it returns every finding and leaves the error policy to the caller.
"""

from typing import NamedTuple, Optional

from eshtml.constants import (
    MISMATCHED_CLOSE,
    NO_OPENING_TAG_NAME,
    TECHNICAL_ATTRIBUTE_NAMES,
    UNCLOSED_TAGS,
    UNKNOWN_ATTRIBUTE,
    UNKNOWN_TAG,
)
from eshtml.scanner import TagOccurrence, scan_attributes, scan_tags
from eshtml.utilities import compute_line_and_column
from eshtml.vocabulary import Vocabulary


class ValidationError(NamedTuple):
    """
    A validation finding.

    Line and column numbers are 1-based,
    except for the unclosed-tags summary, which is reported at (0, 0).
    """
    kind: str
    message: str
    line: int
    column: int

    def format(self) -> str:
        return f'line {self.line}, column {self.column}: {self.message}'


class TagStackFrame(NamedTuple):
    normalised_name: str
    name: str


def unwind_tag_stack(tag_stack: list[TagStackFrame], normalised_name: str,
                     vocabulary: Vocabulary) -> Optional[TagStackFrame]:
    """
    Pop frames for a closing tag, returning the frame to be blamed for a mismatch (if any).

    Greedy recovery: the blamed frame is the non-void frame on top of the stack.
    Frames are then popped, void frames and mismatched frames alike,
    until a frame matching the closing tag has been popped or the stack is empty.
    If the stack holds no matching frame, it is emptied.

    Returns None if the closing tag matched the frame on top (no mismatch),
    otherwise the blamed frame, or a frame named `none` if there was no open frame at all.
    """
    while len(tag_stack) > 0 and vocabulary.is_void_element(tag_stack[-1].normalised_name):
        tag_stack.pop()

    if len(tag_stack) == 0:
        return TagStackFrame(NO_OPENING_TAG_NAME, NO_OPENING_TAG_NAME)

    top_frame = tag_stack[-1]

    while len(tag_stack) > 0:
        frame = tag_stack.pop()
        if frame.normalised_name == normalised_name:
            break

    if top_frame.normalised_name == normalised_name:
        return None

    return top_frame


class Validator:
    """
    Object validating localised markup against a vocabulary.
    """
    _vocabulary: Vocabulary

    def __init__(self, vocabulary: Vocabulary):
        self._vocabulary = vocabulary

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    def validate_source(self, source: str) -> list[ValidationError]:
        tag_occurrences = list(scan_tags(source))
        errors: list[ValidationError] = []

        for tag_occurrence in tag_occurrences:
            self.validate_tag(source, tag_occurrence, errors)
            self.validate_attributes(source, tag_occurrence, errors)

        if len(errors) == 0:
            self.validate_structure(source, tag_occurrences, errors)

        return errors

    def validate_tag(self, source: str, tag_occurrence: TagOccurrence, errors: list[ValidationError]):
        if self._vocabulary.is_known_tag(tag_occurrence.normalised_name):
            return

        line, column = compute_line_and_column(source, tag_occurrence.offset)
        errors.append(
            ValidationError(UNKNOWN_TAG, f'unknown tag `{tag_occurrence.name}`', line, column)
        )

    def validate_attributes(self, source: str, tag_occurrence: TagOccurrence, errors: list[ValidationError]):
        if tag_occurrence.is_closing:
            return

        for attribute_occurrence in scan_attributes(tag_occurrence.attribute_specifications):
            normalised_name = attribute_occurrence.normalised_name
            if (
                self._vocabulary.is_known_attribute(normalised_name)
                or normalised_name in TECHNICAL_ATTRIBUTE_NAMES
            ):
                continue

            line, column = compute_line_and_column(source, tag_occurrence.offset)
            errors.append(
                ValidationError(
                    UNKNOWN_ATTRIBUTE,
                    f'unknown attribute `{attribute_occurrence.name}` in tag `{tag_occurrence.name}`',
                    line,
                    column,
                )
            )

    def validate_structure(self, source: str, tag_occurrences: list[TagOccurrence],
                           errors: list[ValidationError]):
        tag_stack: list[TagStackFrame] = []

        for tag_occurrence in tag_occurrences:
            normalised_name = tag_occurrence.normalised_name

            if tag_occurrence.is_closing:
                blamed_frame = unwind_tag_stack(tag_stack, normalised_name, self._vocabulary)
                if blamed_frame is not None:
                    line, column = compute_line_and_column(source, tag_occurrence.offset)
                    errors.append(
                        ValidationError(
                            MISMATCHED_CLOSE,
                            f'closing tag `{tag_occurrence.name}` does not match '
                            f'opening tag `{blamed_frame.name}`',
                            line,
                            column,
                        )
                    )
            elif not tag_occurrence.is_self_closing and not self._vocabulary.is_void_element(normalised_name):
                tag_stack.append(TagStackFrame(normalised_name, tag_occurrence.name))

        unclosed_tag_names = [
            frame.name
            for frame in tag_stack
            if not self._vocabulary.is_void_element(frame.normalised_name)
        ]
        if len(unclosed_tag_names) > 0:
            errors.append(
                ValidationError(UNCLOSED_TAGS, f'unclosed tags: {", ".join(unclosed_tag_names)}', 0, 0)
            )
