"""Core domain layer for normcache."""

from normcache.core.entities import (
    Fragment,
    FragmentRequest,
    Operation,
    Request,
    ValidationConfig,
)
from normcache.core.interfaces import IStructureValidator

__all__ = [
    # Entities
    "Fragment",
    "FragmentRequest",
    "Operation",
    "Request",
    "ValidationConfig",
    # Interfaces
    "IStructureValidator",
]
