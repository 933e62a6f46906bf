"""Structure validator interface."""

from collections.abc import Mapping
from typing import Any, Protocol

from graphql import DocumentNode


class IStructureValidator(Protocol):
    """Contract for checking payloads against GraphQL selection sets.

    Validators decide whether a data payload contains every field the
    selection set of a fragment or operation asks for.
    """

    def validate_fragment(
        self,
        document: DocumentNode,
        fragment_name: str | None,
        variables: Mapping[str, Any],
        data: Any,
        handle_exception: bool | None = None,
    ) -> bool:
        """Validate data against a fragment definition.

        Args:
            document: Document containing the fragment definition.
            fragment_name: Name of the fragment (required when the
                document holds more than one fragment definition).
            variables: Variables used to resolve @skip/@include.
            data: The candidate payload.
            handle_exception: Return False instead of raising when the
                payload does not match. None uses the validator default.

        Returns:
            True if the payload matches the fragment's structure.

        Raises:
            StructureValidationError: If validation fails and
                handle_exception is False.
        """
        ...

    def validate_operation(
        self,
        document: DocumentNode,
        operation_name: str | None,
        variables: Mapping[str, Any],
        data: Any,
        handle_exception: bool | None = None,
    ) -> bool:
        """Validate data against an operation definition.

        Args:
            document: Document containing the operation definition.
            operation_name: Name of the operation (may be None when the
                document holds a single operation).
            variables: Variables used to resolve @skip/@include.
            data: The candidate payload.
            handle_exception: Return False instead of raising when the
                payload does not match. None uses the validator default.

        Returns:
            True if the payload matches the operation's structure.

        Raises:
            StructureValidationError: If validation fails and
                handle_exception is False.
        """
        ...
