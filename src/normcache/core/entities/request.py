"""Operation and request value objects."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from graphql import DocumentNode, parse, print_ast

from normcache.utils.json_equality import json_hash, json_map_equals


@dataclass(frozen=True, eq=False)
class Operation:
    """A GraphQL operation in a document.

    ``operation_name`` selects the operation when the document defines
    more than one. Equality follows the printed document, like Fragment.
    """

    document: DocumentNode
    operation_name: str | None = None
    printed_document: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "printed_document", print_ast(self.document))

    @classmethod
    def from_source(
        cls, source: str, operation_name: str | None = None
    ) -> "Operation":
        """Create an Operation by parsing GraphQL source.

        Args:
            source: GraphQL source with one or more operations.
            operation_name: Name of the operation to use.

        Returns:
            A new Operation instance.
        """
        return cls(document=parse(source), operation_name=operation_name)

    def _get_children(self) -> list[Any]:
        return [self.printed_document, self.operation_name]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Operation):
            return NotImplemented
        return json_map_equals(other._get_children(), self._get_children())

    def __hash__(self) -> int:
        return json_hash(self._get_children())

    def as_request(self, variables: Mapping[str, Any] | None = None) -> "Request":
        """Build a Request for this operation.

        Args:
            variables: Variables of the operation.

        Returns:
            A new Request referencing this operation.
        """
        return Request(operation=self, variables=variables or {})


@dataclass(frozen=True, eq=False)
class Request:
    """An operation paired with the variables it is executed with."""

    operation: Operation
    variables: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))

    def _get_children(self) -> list[Any]:
        return [self.operation, self.variables]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Request):
            return NotImplemented
        return json_map_equals(other._get_children(), self._get_children())

    def __hash__(self) -> int:
        return json_hash(self._get_children())

    def validates_structure_of(self, data: Mapping[str, Any]) -> bool:
        """Check whether data has the structure this request expects.

        Thin wrapper around the configured structure validator. Never
        raises for malformed data.

        Args:
            data: The candidate ``data`` member of a response.

        Returns:
            True if the structure of data is valid, False otherwise.
        """
        from normcache.core.services.structure_validation import (
            operation_data_valid,
        )

        return operation_data_valid(self, data)
