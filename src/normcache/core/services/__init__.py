"""Domain services for normcache."""

from normcache.core.services.structure_validation import (
    configure,
    fragment_data_valid,
    get_validator,
    operation_data_valid,
)

__all__ = [
    "configure",
    "get_validator",
    "fragment_data_valid",
    "operation_data_valid",
]
