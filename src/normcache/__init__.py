"""normcache - Cache identity for normalized GraphQL client caches.

A Python library defining the values a normalized GraphQL cache is
addressed by: fragments, fragment requests and operation requests, with
structural equality and hashing so they can be used as dict keys, plus
structure validation of payloads before they are trusted.

Example:
    from normcache import Fragment, Operation

    fragment = Fragment.from_source('''
        fragment UserName on User {
            id
            name
        }
    ''')

    request = fragment.as_request(id_fields={"__typename": "User", "id": "1"})
    request.validates_structure_of({"__typename": "User", "id": "1", "name": "Ada"})
    # True

    # Independently parsed documents address the same entry
    cache = {request: {"name": "Ada"}}
    same = Fragment.from_source(
        "fragment UserName on User { id name }"
    ).as_request(id_fields={"id": "1", "__typename": "User"})
    assert cache[same] == {"name": "Ada"}

Operation requests work the same way:
    operation = Operation.from_source("query GetUser($id: ID!) { user(id: $id) { id } }")
    request = operation.as_request(variables={"id": "1"})
    request.validates_structure_of({"user": None})
    # True
"""

from normcache.core.entities import (
    Fragment,
    FragmentRequest,
    Operation,
    Request,
    ValidationConfig,
)
from normcache.core.interfaces import IStructureValidator
from normcache.core.services import configure, get_validator
from normcache.infrastructure.validators import (
    DefaultStructureValidator,
    InvalidDocumentError,
    PartialDataError,
    StructureValidationError,
    validate_fragment_data_structure,
    validate_operation_data_structure,
)
from normcache.utils.json_equality import json_hash, json_map_equals

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "Fragment",
    "FragmentRequest",
    "Operation",
    "Request",
    "ValidationConfig",
    # Core interfaces
    "IStructureValidator",
    # Validation
    "configure",
    "get_validator",
    "DefaultStructureValidator",
    "StructureValidationError",
    "PartialDataError",
    "InvalidDocumentError",
    "validate_fragment_data_structure",
    "validate_operation_data_structure",
    # Structural equality
    "json_map_equals",
    "json_hash",
]
