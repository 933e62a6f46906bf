"""Adapters between cache requests and the structure validator.

These functions translate a FragmentRequest or Request into a call to the
configured IStructureValidator. They report mismatches as False and never
raise for malformed data.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from normcache.core.interfaces.structure_validator import IStructureValidator

if TYPE_CHECKING:
    from normcache.core.entities.fragment import FragmentRequest
    from normcache.core.entities.request import Request

# Module-level validator reference
_validator: IStructureValidator | None = None


def configure(validator: IStructureValidator) -> None:
    """Configure the validator used by ``validates_structure_of``.

    Args:
        validator: The structure validator instance to use.

    Example:
        configure(
            DefaultStructureValidator(
                ValidationConfig(possible_types={"Node": {"User", "Post"}})
            )
        )
    """
    global _validator
    _validator = validator


def get_validator() -> IStructureValidator:
    """Get the configured validator, creating the default one if needed.

    Returns:
        The configured structure validator.
    """
    global _validator
    if _validator is None:
        from normcache.infrastructure.validators.default import (
            DefaultStructureValidator,
        )

        _validator = DefaultStructureValidator()
    return _validator


def fragment_data_valid(
    request: "FragmentRequest",
    data: Mapping[str, Any],
    validator: IStructureValidator | None = None,
) -> bool:
    """Return True if data matches the structure of a fragment request.

    Args:
        request: The fragment request describing the expected structure.
        data: The candidate payload.
        validator: Optional validator overriding the configured one.

    Returns:
        True if the payload is valid, False otherwise.
    """
    return (validator or get_validator()).validate_fragment(
        request.fragment.document,
        request.fragment.fragment_name,
        dict(request.variables),
        data,
        handle_exception=True,
    )


def operation_data_valid(
    request: "Request",
    data: Mapping[str, Any],
    validator: IStructureValidator | None = None,
) -> bool:
    """Return True if data matches the structure of an operation request.

    Args:
        request: The request describing the expected structure.
        data: The candidate payload.
        validator: Optional validator overriding the configured one.

    Returns:
        True if the payload is valid, False otherwise.
    """
    return (validator or get_validator()).validate_operation(
        request.operation.document,
        request.operation.operation_name,
        dict(request.variables),
        data,
        handle_exception=True,
    )
