from math import nan
from types import SimpleNamespace

from grouper import Undefined, is_match, is_partial_equal, is_strict_equal


def describe_is_match():
    def matches_listed_properties_only():
        assert is_match({"age": 25, "name": "John"}, {"age": 25}) is True
        assert is_match({"age": 30, "name": "Bob"}, {"age": 25}) is False

    def requires_all_listed_properties():
        data = {"age": 25, "city": "NY"}
        assert is_match(data, {"age": 25, "city": "NY"}) is True
        assert is_match(data, {"age": 25, "city": "LA"}) is False

    def matches_nested_patterns():
        data = {"user": {"age": 25, "name": "A"}}
        assert is_match(data, {"user": {"age": 25}}) is True
        assert is_match(data, {"user": {"age": 30}}) is False
        assert is_match({"user": None}, {"user": {"age": 25}}) is False
        assert is_match({"user": 25}, {"user": {}}) is False

    def fails_for_missing_properties():
        assert is_match({}, {"age": 25}) is False
        assert is_match({"age": None}, {"age": None}) is True
        assert is_match({}, {"age": None}) is False
        assert is_match({}, {"age": Undefined}) is False

    def matches_everything_with_an_empty_pattern():
        assert is_match({"a": 1}, {}) is True
        assert is_match(None, {}) is True
        assert is_match(42, {}) is True

    def never_matches_none_with_properties():
        assert is_match(None, {"a": 1}) is False
        assert is_match(Undefined, {"a": 1}) is False

    def matches_attributes_of_objects():
        user = SimpleNamespace(age=25, name="John")
        assert is_match(user, {"age": 25}) is True
        assert is_match(user, {"age": 30}) is False

    def matches_sequences_partially():
        data = {"tags": ["js", "ts", "python"]}
        assert is_match(data, {"tags": ["ts"]}) is True
        assert is_match(data, {"tags": ["python", "js"]}) is True
        assert is_match(data, {"tags": ["go"]}) is False
        assert is_match({"tags": "js"}, {"tags": ["js"]}) is False


def describe_is_partial_equal():
    def compares_sequences_of_mappings():
        value = [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}]
        assert is_partial_equal(value, [{"id": 2}]) is True
        assert is_partial_equal(value, [{"id": 3}]) is False

    def requires_value_to_be_at_least_as_long():
        assert is_partial_equal([1], [1, 1]) is False
        assert is_partial_equal([1, 1], [1, 1]) is True

    def compares_scalars_strictly():
        assert is_partial_equal("NY", "NY") is True
        assert is_partial_equal(1, True) is False


def describe_is_strict_equal():
    def compares_equal_values():
        assert is_strict_equal(1, 1) is True
        assert is_strict_equal("a", "a") is True
        assert is_strict_equal(1, 1.0) is True
        assert is_strict_equal(None, None) is True

    def does_not_coerce_types():
        assert is_strict_equal(1, "1") is False
        assert is_strict_equal(1, True) is False
        assert is_strict_equal(0, False) is False
        assert is_strict_equal(None, Undefined) is False

    def compares_booleans():
        assert is_strict_equal(True, True) is True
        assert is_strict_equal(True, False) is False

    def considers_nan_equal_to_itself():
        assert is_strict_equal(nan, nan) is True
        assert is_strict_equal(nan, 0.0) is False
