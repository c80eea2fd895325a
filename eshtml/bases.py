"""
# EsHTML: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for substitution passes.
"""

import abc
import re
from typing import Optional

from eshtml.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from eshtml.vocabulary import MappingTable


class SubstitutionPass(abc.ABC):
    """
    Base class for a substitution pass.

    A pass is one full application of a single transformation across a document.
    Passes hold no state that changes between documents,
    so a pass may be applied to any number of documents.
    """
    _id: str
    _verbose_mode_enabled: bool

    def __init__(self, id_: str, verbose_mode_enabled: bool = False):
        self._id = id_
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def id_(self) -> str:
        return self._id

    def apply(self, string: str) -> str:
        string_before = string
        string_after = self._apply(string)

        if self._verbose_mode_enabled:
            if string_before == string_after:
                no_change_indicator = ' (no change)'
            else:
                no_change_indicator = ''

            try:
                print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{self._id}')
                print(string_before)
                print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
                print(string_after)
                print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{self._id}')
                print('\n\n\n\n')
            except UnicodeEncodeError as unicode_encode_error:
                # caused by Private Use Area code points used for placeholders
                error_message = (
                    'bad print due to non-Unicode terminal encoding. '
                    'Try setting the `PYTHONIOENCODING` environment variable to `utf-8`.'
                )
                raise UnicodeError(error_message) from unicode_encode_error

        return string_after

    @abc.abstractmethod
    def _apply(self, string: str) -> str:
        """
        Apply the pass to a string.
        """
        raise NotImplementedError


class MappingTablePass(SubstitutionPass, abc.ABC):
    """
    Base class for a pass driven by a mapping table.

    The table's tokens are compiled once, into a single alternation tried longest token first,
    so that a shorter token can never consume the leading characters of a longer one.
    All tokens of the table are substituted simultaneously,
    hence the output of one substitution is never rewritten again by another in the same pass.
    An empty table gives a pass that changes nothing.
    """
    _table: MappingTable
    _pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, table: MappingTable, verbose_mode_enabled: bool = False):
        super().__init__(id_, verbose_mode_enabled)
        self._table = table

        if len(table) > 0:
            self._pattern_compiled = re.compile(
                pattern=self.build_regex_pattern(table.build_alternation_regex()),
                flags=re.IGNORECASE | re.VERBOSE,
            )
        else:
            self._pattern_compiled = None

    @property
    def table(self) -> MappingTable:
        return self._table

    def _apply(self, string: str) -> str:
        if self._pattern_compiled is None:
            return string

        return self._pattern_compiled.sub(self.substitute_function, string)

    @staticmethod
    @abc.abstractmethod
    def build_regex_pattern(alternation_regex: str) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def substitute_function(self, match: re.Match) -> str:
        raise NotImplementedError
