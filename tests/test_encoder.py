import math
from dataclasses import dataclass

import pytest

from toonkit.encoder import encode, encode_array, encode_object
from toonkit.options import (
    Delimiter,
    EncodeOptions,
    KeyFoldingMode,
    ToonError,
    TypeMismatchError,
)


def test_encode_null():
    assert encode(None) == "null"


def test_encode_bool():
    assert encode(True) == "true"
    assert encode(False) == "false"


def test_encode_number():
    assert encode(42) == "42"
    assert encode(math.pi) == "3.141592653589793"
    assert encode(-5) == "-5"


def test_encode_nan_becomes_null():
    assert encode(float("nan")) == "null"


def test_encode_string():
    assert encode("hello") == "hello"
    assert encode("hello world") == "hello world"


def test_encode_simple_object():
    result = encode({"name": "Alice", "age": 30})
    assert "name: Alice" in result
    assert "age: 30" in result
    assert result == "name: Alice\nage: 30"


def test_encode_primitive_array():
    assert encode({"tags": ["reading", "gaming", "coding"]}) == "tags[3]: reading,gaming,coding"


def test_encode_tabular_array():
    result = encode({"users": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]})
    assert "users[2]{id,name}:" in result
    assert "1,Alice" in result
    assert "2,Bob" in result
    assert result == "users[2]{id,name}:\n  1,Alice\n  2,Bob"


def test_encode_empty_array():
    assert encode({"items": []}) == "items[0]:"


def test_encode_nested_object():
    result = encode({"user": {"name": "Alice", "age": 30}})
    assert "user:" in result
    assert "name: Alice" in result
    assert "age: 30" in result


def test_custom_delimiter():
    opts = EncodeOptions().with_delimiter(Delimiter.PIPE)
    result = encode({"tags": ["a", "b", "c"]}, opts)
    assert "|" in result
    assert result == "tags[3|]: a|b|c"


def test_quoted_values():
    assert encode({"s": "true"}) == 's: "true"'
    assert encode(["a,b"]) == '[1]: "a,b"'


def test_encode_list_item_tabular_array():
    obj = {
        "items": [
            {
                "users": [{"id": 1, "name": "Ada"}, {"id": 2, "name": "Bob"}],
                "status": "active",
            }
        ]
    }
    result = encode(obj)
    assert "  - users[2]{id,name}:" in result
    assert "      1,Ada" in result
    assert "      2,Bob" in result
    assert "    status: active" in result


def test_encode_list_item_tabular_array_multiple_items():
    obj = {
        "data": [
            {"records": [{"id": 1, "val": "x"}], "count": 1},
            {"records": [{"id": 2, "val": "y"}], "count": 1},
        ]
    }
    result = encode(obj)
    rows = [line for line in result.splitlines() if line.strip()[:1].isdigit()]
    assert rows
    for row in rows:
        assert len(row) - len(row.lstrip()) == 6


def test_encode_list_item_non_tabular_array_unchanged():
    result = encode({"items": [{"tags": ["a", "b", "c"], "name": "test"}]})
    assert "  - tags[3]: a,b,c" in result
    assert "    name: test" in result


def test_encode_list_item_tabular_array_with_nested_fields():
    obj = {
        "entries": [
            {
                "people": [{"name": "Alice", "age": 30}, {"name": "Bob", "age": 25}],
                "total": 2,
                "category": "staff",
            }
        ]
    }
    result = encode(obj)
    assert "  - people[2]{name,age}:" in result
    assert "      Alice,30" in result
    assert "      Bob,25" in result
    assert "    total: 2" in result
    assert "    category: staff" in result


def test_encode_mixed_nested_array():
    assert encode({"items": [1, {"a": 1}, [2, 3]]}) == "items[3]:\n  - 1\n  - a: 1\n  - [2]: 2,3"


def test_encode_empty_object_list_item():
    assert encode({"items": [{}, 1]}) == "items[2]:\n  -\n  - 1"


def test_key_folding_full_chain():
    opts = EncodeOptions().with_key_folding(KeyFoldingMode.SAFE)
    assert encode({"a": {"b": {"c": 1}}}, opts) == "a.b.c: 1"


def test_key_folding_respects_flatten_depth():
    opts = EncodeOptions().with_key_folding(KeyFoldingMode.SAFE).with_flatten_depth(2)
    assert encode({"a": {"b": {"c": 1}}}, opts) == "a.b:\n  c: 1"


def test_key_folding_off_by_default():
    assert encode({"a": {"b": 1}}) == "a:\n  b: 1"


@dataclass
class _User:
    name: str
    age: int
    active: bool


def test_encode_dataclass():
    result = encode(_User("Alice", 30, True))
    assert "name: Alice" in result
    assert "age: 30" in result
    assert "active: true" in result


def test_encode_object_and_array_helpers():
    assert "name: Alice" in encode_object({"name": "Alice", "age": 30})
    assert encode_array(["a", "b", "c"]) == "[3]: a,b,c"


def test_encode_object_rejects_non_object():
    with pytest.raises(TypeMismatchError) as info:
        encode_object(42)
    assert info.value.expected == "object"
    assert info.value.found == "number"


def test_encode_array_rejects_non_array():
    with pytest.raises(TypeMismatchError) as info:
        encode_array({"key": "value"})
    assert info.value.found == "object"


def test_depth_limit():
    value = 1
    for _ in range(300):
        value = {"k": value}
    with pytest.raises(ToonError):
        encode(value)