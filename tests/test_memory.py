import pytest

from gpualign.memory import (
    HeapProperties,
    HeapPropertiesSource,
    HeapType,
    MemoryPool,
    MemorySegmentGroup,
    preferred_memory_segment_group,
)


class FakeDevice:
    def __init__(self, pools):
        self.pools = pools
        self.calls = []

    def custom_heap_properties(self, node_mask, heap_type):
        self.calls.append((node_mask, heap_type))
        return HeapProperties(memory_pool_preference=self.pools[heap_type])


DISCRETE = {
    HeapType.DEFAULT: MemoryPool.L1,
    HeapType.UPLOAD: MemoryPool.L0,
    HeapType.READBACK: MemoryPool.L0,
}


def test_protocol_conforming_device_is_queried():
    device = FakeDevice(DISCRETE)
    assert isinstance(device, HeapPropertiesSource)
    result = preferred_memory_segment_group(device, False, HeapType.READBACK)
    assert result == MemorySegmentGroup.NON_LOCAL
    assert device.calls == [(0, HeapType.READBACK)]


@pytest.mark.parametrize("heap_type", list(DISCRETE))
def test_uma_is_always_local_without_querying(heap_type):
    device = FakeDevice(DISCRETE)
    assert preferred_memory_segment_group(device, True, heap_type) == MemorySegmentGroup.LOCAL
    assert device.calls == []


def test_l1_pool_is_local():
    device = FakeDevice(DISCRETE)
    assert (
        preferred_memory_segment_group(device, False, HeapType.DEFAULT)
        == MemorySegmentGroup.LOCAL
    )


@pytest.mark.parametrize("heap_type", [HeapType.UPLOAD, HeapType.READBACK])
def test_l0_pool_is_non_local(heap_type):
    device = FakeDevice(DISCRETE)
    assert (
        preferred_memory_segment_group(device, False, heap_type)
        == MemorySegmentGroup.NON_LOCAL
    )


def test_unknown_pool_is_non_local():
    device = FakeDevice({HeapType.CUSTOM: MemoryPool.UNKNOWN})
    assert (
        preferred_memory_segment_group(device, False, HeapType.CUSTOM)
        == MemorySegmentGroup.NON_LOCAL
    )


def test_queries_first_node_with_given_heap_type():
    device = FakeDevice(DISCRETE)
    preferred_memory_segment_group(device, False, HeapType.UPLOAD)
    assert device.calls == [(0, HeapType.UPLOAD)]


def test_heap_properties_default_heap_type():
    props = HeapProperties(memory_pool_preference=MemoryPool.L0)
    assert props.heap_type == HeapType.CUSTOM