"""Structure validator implementations."""

from normcache.infrastructure.validators.default import (
    DefaultStructureValidator,
    InvalidDocumentError,
    PartialDataError,
    StructureValidationError,
    validate_fragment_data_structure,
    validate_operation_data_structure,
)

__all__ = [
    "DefaultStructureValidator",
    "StructureValidationError",
    "PartialDataError",
    "InvalidDocumentError",
    "validate_fragment_data_structure",
    "validate_operation_data_structure",
]
