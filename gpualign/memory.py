"""Choice of the memory segment group a heap type should be budgeted against."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, runtime_checkable

__all__ = [
    "HeapType",
    "MemoryPool",
    "MemorySegmentGroup",
    "HeapProperties",
    "HeapPropertiesSource",
    "preferred_memory_segment_group",
]


class HeapType(IntEnum):
    DEFAULT = 1
    UPLOAD = 2
    READBACK = 3
    CUSTOM = 4


class MemoryPool(IntEnum):
    UNKNOWN = 0
    L0 = 1
    L1 = 2


class MemorySegmentGroup(IntEnum):
    LOCAL = 0
    NON_LOCAL = 1


@dataclass(frozen=True)
class HeapProperties:
    """Custom heap properties reported by a device for a heap type."""

    memory_pool_preference: MemoryPool
    heap_type: HeapType = HeapType.CUSTOM


@runtime_checkable
class HeapPropertiesSource(Protocol):
    """A device that reports custom heap properties for a heap type."""

    def custom_heap_properties(self, node_mask: int, heap_type: HeapType) -> HeapProperties:
        """Return the custom heap properties equivalent to ``heap_type``."""
        ...


def preferred_memory_segment_group(
    device: HeapPropertiesSource, is_uma: bool, heap_type: HeapType
) -> MemorySegmentGroup:
    """Return the segment group whose budget the given heap type draws from."""
    if is_uma:
        return MemorySegmentGroup.LOCAL
    properties = device.custom_heap_properties(0, heap_type)
    if properties.memory_pool_preference == MemoryPool.L1:
        return MemorySegmentGroup.LOCAL
    return MemorySegmentGroup.NON_LOCAL