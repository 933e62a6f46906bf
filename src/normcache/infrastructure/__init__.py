"""Infrastructure layer implementations for normcache."""

from normcache.infrastructure.validators import DefaultStructureValidator

__all__ = [
    "DefaultStructureValidator",
]
