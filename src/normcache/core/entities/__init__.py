"""Domain entities for normcache."""

from normcache.core.entities.fragment import Fragment, FragmentRequest
from normcache.core.entities.request import Operation, Request
from normcache.core.entities.validation_config import ValidationConfig

__all__ = [
    "Fragment",
    "FragmentRequest",
    "Operation",
    "Request",
    "ValidationConfig",
]
