"""Fragment and fragment request value objects."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from graphql import DocumentNode, parse, print_ast

from normcache.utils.json_equality import json_hash, json_map_equals


@dataclass(frozen=True, eq=False, repr=False)
class Fragment:
    """A fragment in a document, optionally selected by name.

    The document must contain at least one fragment definition, and
    ``fragment_name`` must be given when it contains more than one. That
    rule is only checked when the fragment is interpreted, e.g. during
    structure validation.

    Two fragments are equal when their printed documents and fragment
    names are equal, so independently parsed copies of the same source
    identify the same cache entry.
    """

    document: DocumentNode
    fragment_name: str | None = None
    printed_document: str = field(init=False)

    def __post_init__(self) -> None:
        """Snapshot the canonical printed form of the document."""
        object.__setattr__(self, "printed_document", print_ast(self.document))

    @classmethod
    def from_source(cls, source: str, fragment_name: str | None = None) -> "Fragment":
        """Create a Fragment by parsing GraphQL source.

        Args:
            source: GraphQL source with one or more fragment definitions.
            fragment_name: Name of the fragment definition to use.

        Returns:
            A new Fragment instance.
        """
        return cls(document=parse(source), fragment_name=fragment_name)

    def _get_children(self) -> list[Any]:
        return [self.printed_document, self.fragment_name]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Fragment):
            return NotImplemented
        return json_map_equals(other._get_children(), self._get_children())

    def __hash__(self) -> int:
        return json_hash(self._get_children())

    def __repr__(self) -> str:
        document_repr = json.dumps(self.printed_document)
        return (
            f"Fragment(document=DocumentNode({document_repr}), "
            f"fragment_name={self.fragment_name!r})"
        )

    def as_request(
        self,
        id_fields: Mapping[str, Any],
        variables: Mapping[str, Any] | None = None,
    ) -> "FragmentRequest":
        """Build a FragmentRequest for this fragment.

        Args:
            id_fields: Identifying fields of the entity (usually
                ``{"__typename": ..., "id": ...}``).
            variables: Variables of the fragment.

        Returns:
            A new FragmentRequest referencing this fragment.
        """
        return FragmentRequest(
            fragment=self,
            id_fields=id_fields,
            variables=variables or {},
        )


@dataclass(frozen=True, eq=False, repr=False)
class FragmentRequest:
    """Cache access request of a fragment with variables.

    Identifies one entity read or written through ``fragment``. The
    mappings are copied into read-only views on construction.
    """

    fragment: Fragment
    # All identifying data of the entity, usually {__typename, id}
    id_fields: Mapping[str, Any]
    variables: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id_fields", MappingProxyType(dict(self.id_fields)))
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))

    def _get_children(self) -> list[Any]:
        return [self.fragment, self.variables, self.id_fields]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, FragmentRequest):
            return NotImplemented
        return json_map_equals(other._get_children(), self._get_children())

    def __hash__(self) -> int:
        return json_hash(self._get_children())

    def __repr__(self) -> str:
        return (
            f"FragmentRequest(fragment={self.fragment!r}, "
            f"variables={dict(self.variables)!r})"
        )

    def validates_structure_of(self, data: Mapping[str, Any]) -> bool:
        """Check whether data has the structure this request expects.

        Thin wrapper around the configured structure validator. Never
        raises for malformed data.

        Args:
            data: The candidate payload for the fragment.

        Returns:
            True if the structure of data is valid, False otherwise.
        """
        from normcache.core.services.structure_validation import fragment_data_valid

        return fragment_data_valid(self, data)
