"""Structure validation configuration entity."""

from dataclasses import dataclass, field


@dataclass
class ValidationConfig:
    """Structure validation configuration.

    Controls how payloads are checked against the selection set of a
    fragment or operation before they are trusted by the cache.

    Type conditions:
        A fragment spread or inline fragment applies to an object when its
        ``__typename`` matches the type condition, or is listed under that
        condition in ``possible_types`` (interfaces and unions).
    """

    # Require __typename on every object in the payload
    add_typename: bool = False

    # Abstract type name -> concrete type names implementing it
    possible_types: dict[str, set[str]] = field(default_factory=dict)

    # Report validation failures as False instead of raising
    handle_exceptions: bool = False
