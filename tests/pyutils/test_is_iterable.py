from array import array
from collections import namedtuple
from itertools import count

from grouper.pyutils import is_collection, is_iterable


def describe_is_collection():
    def should_return_true_for_lists_and_tuples():
        assert is_collection([]) is True
        assert is_collection([0, 1, 2]) is True
        assert is_collection(()) is True
        assert is_collection(("A", "B", "C")) is True

    def should_return_true_for_named_tuples():
        named = namedtuple("named", "A B C")
        assert is_collection(named(0, 1, 2)) is True

    def should_return_true_for_arrays_and_ranges():
        assert is_collection(array("i", [0, 1, 2])) is True
        assert is_collection(range(10)) is True

    def should_return_true_for_dict_views():
        assert is_collection({0: "A"}.keys()) is True
        assert is_collection({0: "A"}.values()) is True

    def should_return_false_for_infinite_generators():
        assert is_collection(count()) is False

    def should_return_false_for_none_object():
        assert is_collection(None) is False

    def should_return_false_for_strings_and_bytes():
        assert is_collection("ABC") is False
        assert is_collection(b"ABC") is False
        assert is_collection(bytearray(b"ABC")) is False

    def should_return_false_for_mappings():
        assert is_collection({}) is False
        assert is_collection({"A": 1}) is False

    def should_return_false_for_scalars():
        assert is_collection(0) is False
        assert is_collection(1.5) is False
        assert is_collection(True) is False


def describe_is_iterable():
    def should_return_true_for_collections():
        assert is_iterable([1, 2]) is True
        assert is_iterable((1, 2)) is True
        assert is_iterable({1, 2}) is True

    def should_return_true_for_generators():
        assert is_iterable(count()) is True
        assert is_iterable(x for x in range(3)) is True

    def should_return_false_for_strings_and_mappings():
        assert is_iterable("ABC") is False
        assert is_iterable({"A": 1}) is False

    def should_return_false_for_none_and_scalars():
        assert is_iterable(None) is False
        assert is_iterable(42) is False
        assert is_iterable(False) is False
