"""
# EsHTML: vocabulary.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Mapping tables between localised and canonical vocabulary.

A vocabulary is built once and never mutated afterwards,
so a single instance may be shared by any number of validators and rewriters.
"""

import re
from typing import Iterable, Iterator, NamedTuple, Optional

from eshtml.exceptions import InconsistentMappingException
from eshtml.utilities import build_alternation_regex, sort_longest_first


class MappingTable:
    """
    Immutable collection of («localised_token», «canonical_token») pairs.

    Tokens are case-insensitive and are stored lowercased.
    Many localised tokens may map to the same canonical token,
    but each localised token maps to exactly one canonical token.
    Pairs keep their declaration order, which decides the inversion of many-to-one tables.
    """
    _canonical_from_localised: dict[str, str]

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()):
        canonical_from_localised: dict[str, str] = {}

        for localised_token, canonical_token in pairs:
            localised_token = MappingTable.normalise_token(localised_token)
            canonical_token = MappingTable.normalise_token(canonical_token)

            try:
                existing_canonical_token = canonical_from_localised[localised_token]
            except KeyError:
                canonical_from_localised[localised_token] = canonical_token
                continue

            if existing_canonical_token != canonical_token:
                raise InconsistentMappingException(
                    f'error: token `{localised_token}` maps to both '
                    f'`{existing_canonical_token}` and `{canonical_token}`'
                )

        self._canonical_from_localised = canonical_from_localised

    @staticmethod
    def normalise_token(token: str) -> str:
        if re.fullmatch(pattern=r'''[^\s"'<>=/]+''', string=token) is None:
            raise InconsistentMappingException(f'error: invalid token `{token}`')

        return token.lower()

    def __contains__(self, token: str) -> bool:
        return token.lower() in self._canonical_from_localised

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._canonical_from_localised.items())

    def __len__(self) -> int:
        return len(self._canonical_from_localised)

    def __repr__(self) -> str:
        return f'MappingTable({list(self)!r})'

    def get(self, token: str) -> Optional[str]:
        return self._canonical_from_localised.get(token.lower())

    @property
    def localised_tokens(self) -> tuple[str, ...]:
        return tuple(self._canonical_from_localised)

    @property
    def canonical_tokens(self) -> frozenset[str]:
        return frozenset(self._canonical_from_localised.values())

    def sorted_longest_first(self) -> list[tuple[str, str]]:
        return [
            (localised_token, self._canonical_from_localised[localised_token])
            for localised_token in sort_longest_first(self._canonical_from_localised)
        ]

    def build_alternation_regex(self) -> str:
        return build_alternation_regex(self._canonical_from_localised)

    def inverted(self) -> 'MappingTable':
        """
        Compute the canonical-to-localised table.

        Where several localised tokens share a canonical token,
        the first one declared is kept.
        """
        localised_from_canonical: dict[str, str] = {}
        for localised_token, canonical_token in self._canonical_from_localised.items():
            localised_from_canonical.setdefault(canonical_token, localised_token)

        return MappingTable(localised_from_canonical.items())


class Vocabulary(NamedTuple):
    """
    The complete set of mapping tables for one locale.

    Void element names are canonical names.
    """
    tag_table: MappingTable
    attribute_table: MappingTable
    attribute_value_table: MappingTable
    unchanged_tag_names: frozenset[str]
    unchanged_attribute_names: frozenset[str]
    unchanged_attribute_prefixes: tuple[str, ...]
    void_element_names: frozenset[str]

    @staticmethod
    def build(tag_pairs: Iterable[tuple[str, str]] = (),
              attribute_pairs: Iterable[tuple[str, str]] = (),
              attribute_value_pairs: Iterable[tuple[str, str]] = (),
              unchanged_tag_names: Iterable[str] = (),
              unchanged_attribute_names: Iterable[str] = (),
              unchanged_attribute_prefixes: Iterable[str] = (),
              void_element_names: Iterable[str] = (),
              ) -> 'Vocabulary':
        """
        Build a vocabulary, checking it for internal consistency.

        A token may not be both unchanged and localised,
        since it would then be both kept and rewritten.
        """
        tag_table = MappingTable(tag_pairs)
        attribute_table = MappingTable(attribute_pairs)
        attribute_value_table = MappingTable(attribute_value_pairs)
        unchanged_tag_names = frozenset(name.lower() for name in unchanged_tag_names)
        unchanged_attribute_names = frozenset(name.lower() for name in unchanged_attribute_names)
        unchanged_attribute_prefixes = tuple(prefix.lower() for prefix in unchanged_attribute_prefixes)
        void_element_names = frozenset(name.lower() for name in void_element_names)

        for name in sorted(unchanged_tag_names):
            if name in tag_table:
                raise InconsistentMappingException(
                    f'error: tag `{name}` is both unchanged and mapped to `{tag_table.get(name)}`'
                )

        for name in sorted(unchanged_attribute_names):
            if name in attribute_table:
                raise InconsistentMappingException(
                    f'error: attribute `{name}` is both unchanged and mapped to `{attribute_table.get(name)}`'
                )

        return Vocabulary(
            tag_table,
            attribute_table,
            attribute_value_table,
            unchanged_tag_names,
            unchanged_attribute_names,
            unchanged_attribute_prefixes,
            void_element_names,
        )

    def canonical_tag_name(self, name: str) -> str:
        name = name.lower()
        canonical_name = self.tag_table.get(name)
        if canonical_name is None:
            return name

        return canonical_name

    def is_known_tag(self, name: str) -> bool:
        name = name.lower()
        return name in self.tag_table or name in self.unchanged_tag_names

    def is_unchanged_attribute(self, name: str) -> bool:
        name = name.lower()
        return (
            name in self.unchanged_attribute_names
            or any(name.startswith(prefix) for prefix in self.unchanged_attribute_prefixes)
        )

    def is_known_attribute(self, name: str) -> bool:
        return name in self.attribute_table or self.is_unchanged_attribute(name)

    def is_void_element(self, name: str) -> bool:
        return self.canonical_tag_name(name) in self.void_element_names

    def inverted(self) -> 'Vocabulary':
        """
        Compute the vocabulary for rewriting canonical markup back to localised markup.

        Attribute values are not declared in both directions, so the value table is left empty.
        """
        return self._replace(
            tag_table=self.tag_table.inverted(),
            attribute_table=self.attribute_table.inverted(),
            attribute_value_table=MappingTable(),
        )
