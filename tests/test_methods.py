"""Tests for method bitmask conversion."""

from itertools import combinations

from models.flags import Method
from permissions.methods import (
    ALL_METHODS_BITMASK,
    READ_METHODS,
    READ_ONLY_METHODS_BITMASK,
    WRITE_METHODS,
    WRITE_METHODS_BITMASK,
    bitmask_to_methods,
    is_method_allowed,
    method_count,
    methods_to_bitmask,
)


class TestMethodEnum:
    def test_values_are_pinned(self):
        assert [(m.name, m.value) for m in Method] == [
            ("HEAD", 0),
            ("GET", 1),
            ("POST", 2),
            ("PUT", 3),
            ("PATCH", 4),
            ("DELETE", 5),
            ("OPTIONS", 6),
            ("LOCATE", 7),
            ("DEFINE", 8),
        ]

    def test_method_count(self):
        assert method_count() == 9

    def test_read_write_partition(self):
        assert READ_METHODS.isdisjoint(WRITE_METHODS)
        assert READ_METHODS | WRITE_METHODS == set(Method)


class TestBitmask:
    def test_empty(self):
        assert methods_to_bitmask([]) == 0
        assert bitmask_to_methods(0) == []

    def test_get_put(self):
        assert methods_to_bitmask([Method.GET, Method.PUT]) == 0b1010 == 10
        assert bitmask_to_methods(10) == [Method.GET, Method.PUT]

    def test_duplicates_and_order_are_ignored(self):
        assert methods_to_bitmask([Method.PUT, Method.GET, Method.PUT]) == 10

    def test_accepts_plain_ints(self):
        assert methods_to_bitmask([1, 3]) == 10

    def test_decoded_order_is_ascending(self):
        assert bitmask_to_methods(methods_to_bitmask([Method.DEFINE, Method.HEAD, Method.DELETE])) == [
            Method.HEAD,
            Method.DELETE,
            Method.DEFINE,
        ]

    def test_bits_beyond_last_method_are_ignored(self):
        assert bitmask_to_methods((1 << 9) | (1 << 15) | 1) == [Method.HEAD]

    def test_every_subset_round_trips(self):
        for size in range(len(Method) + 1):
            for subset in combinations(Method, size):
                assert bitmask_to_methods(methods_to_bitmask(subset)) == sorted(subset)

    def test_is_method_allowed(self):
        assert is_method_allowed(READ_ONLY_METHODS_BITMASK, Method.GET)
        assert not is_method_allowed(READ_ONLY_METHODS_BITMASK, Method.PUT)


class TestNamedMasks:
    def test_values(self):
        assert ALL_METHODS_BITMASK == 0x1FF
        assert READ_ONLY_METHODS_BITMASK == 0b011000011
        assert WRITE_METHODS_BITMASK == 0b100111100

    def test_masks_partition_all(self):
        assert READ_ONLY_METHODS_BITMASK & WRITE_METHODS_BITMASK == 0
        assert READ_ONLY_METHODS_BITMASK | WRITE_METHODS_BITMASK == ALL_METHODS_BITMASK

    def test_read_only_methods(self):
        assert bitmask_to_methods(READ_ONLY_METHODS_BITMASK) == [
            Method.HEAD,
            Method.GET,
            Method.OPTIONS,
            Method.LOCATE,
        ]
