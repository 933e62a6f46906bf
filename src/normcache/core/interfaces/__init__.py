"""Core interfaces (Protocol classes) for normcache."""

from normcache.core.interfaces.structure_validator import IStructureValidator

__all__ = [
    "IStructureValidator",
]
