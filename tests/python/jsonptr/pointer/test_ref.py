from typing import Any

import pytest

from jsonptr.pointer import (
    ANY,
    ARRAY,
    BOOLEAN,
    INTEGER,
    NUMBER,
    OBJECT,
    STRING,
    STRUCTURE,
    JSONPointer,
    JSONRef,
    nullable,
)
from jsonptr.pointer.errors import (
    JSONPointerIndexError,
    JSONPointerNotFoundError,
    JSONPointerTypeError,
    RootParentError,
)
from jsonptr.utils.parsing import parse_json


def _object() -> Any:
    return parse_json('{"field1": 123, "field2": ["abc", "def"], "field3": true, "field4": null}')


def _nested() -> Any:
    return parse_json('{"field1": 123, "field2": {"aaa": 99, "bbb": [1, 1, 2, 3, 5]}}')


def test_root_ref():
    doc = _object()
    ref = JSONRef(doc)
    assert ref.base is doc
    assert ref.node is doc
    assert ref.pointer is JSONPointer.root
    assert ref.depth == 0
    assert ref.node_type is ANY


def test_child_integer():
    ref = JSONRef({"a": 1})
    child = ref.child("a", INTEGER)
    assert child.node == 1
    assert child.value == 1
    assert child.pointer == JSONPointer("/a")
    assert child.node_type is INTEGER


def test_child_wrong_type():
    with pytest.raises(JSONPointerTypeError) as error:
        JSONRef({"a": 1}).child("a", STRING)
    assert error.value.expected == "String"
    assert error.value.value == 1
    assert error.value.node_name == "Child"
    assert error.value.pointer == JSONPointer("/a")
    assert str(error.value) == "[/a] Child not correct type (String), was 1"


def test_child_array_index():
    ref = JSONRef(_object()).child("field2", ARRAY)
    item = ref.child(1, STRING)
    assert item.node == "def"
    assert item.pointer == JSONPointer("/field2/1")
    assert ref.child("0", STRING).node == "abc"


def test_child_missing():
    ref = JSONRef(_object())
    with pytest.raises(JSONPointerNotFoundError) as error:
        ref.child("missing")
    assert error.value.pointer == JSONPointer.root

    array = ref.child("field2", ARRAY)
    with pytest.raises(JSONPointerNotFoundError) as error:
        array.child(2)
    assert error.value.pointer == JSONPointer("/field2")

    with pytest.raises(JSONPointerIndexError):
        array.child("01")
    with pytest.raises(JSONPointerIndexError):
        array.child(-1)


def test_child_of_primitive():
    ref = JSONRef(_object()).child("field1")
    with pytest.raises(JSONPointerNotFoundError) as error:
        ref.child("x")
    assert error.value.text == "intermediate node is not a container"
    assert error.value.pointer == JSONPointer("/field1")


def test_child_nullable():
    ref = JSONRef(_object())
    child = ref.child("field4", nullable(STRING))
    assert child.node is None
    assert child.pointer == JSONPointer("/field4")

    with pytest.raises(JSONPointerTypeError) as error:
        ref.child("field4", STRING)
    assert error.value.value is None
    assert str(error.value) == "[/field4] Child not correct type (String), was null"

    with pytest.raises(JSONPointerNotFoundError) as error:
        child.child("x")
    assert error.value.text == "intermediate node is null"


def test_of():
    doc = _nested()
    ref = JSONRef.of(doc, "/field2/bbb/4", INTEGER)
    assert ref.node == 5
    assert ref.base is doc
    assert ref.pointer == JSONPointer("/field2/bbb/4")
    assert JSONRef.of(doc, JSONPointer("/field2"), OBJECT).node is doc["field2"]
    assert JSONRef.of(doc, "").node is doc


def test_of_errors():
    doc = _nested()
    with pytest.raises(JSONPointerTypeError) as error:
        JSONRef.of(doc, "/field1", STRING)
    assert str(error.value) == "[/field1] Node not correct type (String), was 123"
    assert error.value.node_name == "Node"

    with pytest.raises(JSONPointerNotFoundError) as error:
        JSONRef.of(doc, "/field2/ccc/0")
    assert error.value.pointer == JSONPointer("/field2")

    with pytest.raises(JSONPointerIndexError):
        JSONRef.of(doc, "/field2/bbb/-")


def test_parent():
    doc = _nested()
    ref = JSONRef.of(doc, "/field2/bbb/4", INTEGER)
    parent = ref.parent(ARRAY)
    assert parent.node is doc["field2"]["bbb"]
    assert parent.pointer == JSONPointer("/field2/bbb")
    grandparent = parent.parent()
    assert grandparent.node is doc["field2"]
    assert grandparent.node_type is STRUCTURE
    root = grandparent.parent(OBJECT)
    assert root.node is doc
    assert root.pointer is JSONPointer.root
    assert root == JSONRef(doc)


def test_parent_cache_matches_resolution():
    doc = _nested()
    ref = JSONRef(doc).child("field2", OBJECT).child("bbb", ARRAY).child(2, INTEGER)
    assert ref.parent().node is JSONPointer("/field2/bbb").find(doc)
    assert ref.parent().parent().node is JSONPointer("/field2").find(doc)


def test_parent_wrong_type():
    ref = JSONRef(_object()).child("field2", ARRAY).child(0)
    with pytest.raises(JSONPointerTypeError) as error:
        ref.parent(OBJECT)
    assert error.value.node_name == "Parent"
    assert error.value.expected == "Object"
    assert str(error.value) == "[/field2] Parent not correct type (Object), was [ ... ]"


def test_root_parent():
    with pytest.raises(RootParentError) as error:
        JSONRef(_object()).parent()
    assert str(error.value) == "root has no parent"


def test_as_ref_and_is_ref():
    ref = JSONRef({"a": "mango"}).child("a")
    assert ref.is_ref(STRING)
    assert not ref.is_ref(OBJECT)
    narrowed = ref.as_ref(STRING)
    assert narrowed.node == "mango"
    assert narrowed.node_type is STRING
    assert narrowed == ref
    assert ref.as_ref(nullable(STRING)).node == "mango"

    with pytest.raises(JSONPointerTypeError) as error:
        ref.as_ref(OBJECT)
    assert str(error.value) == '[/a] Node not correct type (Object), was "mango"'

    with pytest.raises(JSONPointerTypeError) as error:
        JSONRef("mango").as_ref(OBJECT)
    assert str(error.value) == 'Node not correct type (Object), was "mango"'


def test_rebase():
    doc = _nested()
    ref = JSONRef(doc).child("field2", OBJECT)
    rebased = ref.rebase()
    assert rebased.base is doc["field2"]
    assert rebased.node is doc["field2"]
    assert rebased.pointer is JSONPointer.root
    assert rebased.node_type is OBJECT
    assert rebased.child("bbb").pointer == JSONPointer("/bbb")
    with pytest.raises(RootParentError):
        rebased.parent()


def test_optional_child():
    ref = JSONRef(_object())
    assert ref.optional_child("missing") is None
    assert ref.optional_child("field1", INTEGER).node == 123
    with pytest.raises(JSONPointerTypeError):
        ref.optional_child("field1", STRING)

    array = ref.child("field2", ARRAY)
    assert array.optional_child(5) is None
    assert array.optional_child("-") is None
    assert array.optional_child(0, STRING).node == "abc"


def test_has_child():
    ref = JSONRef(_object())
    assert ref.has_child("field1")
    assert ref.has_child("field1", INTEGER)
    assert not ref.has_child("field1", STRING)
    assert not ref.has_child("missing")
    assert ref.has_child("field4", nullable(STRING))
    assert not ref.has_child("field4", STRING)

    array = ref.child("field2")
    assert array.has_child(1, STRING)
    assert not array.has_child(2)
    assert not array.has_child(-1)
    assert not array.has_child("01")
    assert not ref.child("field1").has_child("x")


def test_has_child_bool_key():
    assert not JSONRef([1, 2]).has_child(True)
    assert not JSONRef({"True": 1, "true": 2}).has_child(False)


def test_child_values():
    ref = JSONRef(_object())
    assert ref.child_value("field1", INTEGER) == 123
    assert ref.child_value("field3", BOOLEAN) is True
    assert ref.optional_value("field1", NUMBER) == 123
    assert ref.optional_value("missing", STRING) is None
    with pytest.raises(JSONPointerTypeError):
        ref.child_value("field3", INTEGER)
    with pytest.raises(JSONPointerNotFoundError):
        ref.child_value("missing", STRING)


def test_optional_value_of_null_member():
    ref = JSONRef(_object())
    assert ref.optional_value("field4", STRING) is None
    assert ref.optional_value("field4", INTEGER) is None
    assert JSONRef({"a": None}).optional_value("a", BOOLEAN) is None
    assert JSONRef([None, "x"]).optional_value(0, STRING) is None
    assert JSONRef([None, "x"]).optional_value(1, STRING) == "x"
    with pytest.raises(JSONPointerTypeError):
        ref.optional_value("field1", STRING)


def test_children():
    doc = _object()
    refs = list(JSONRef(doc).children())
    assert [str(ref.pointer) for ref in refs] == ["/field1", "/field2", "/field3", "/field4"]
    assert all(ref.parent().node is doc for ref in refs)

    items = [ref.node for ref in JSONRef(doc).child("field2").children(STRING)]
    assert items == ["abc", "def"]

    with pytest.raises(JSONPointerTypeError):
        list(JSONRef(doc).children(STRING))
    with pytest.raises(JSONPointerTypeError):
        list(JSONRef(doc).child("field1").children())


def test_locate_child():
    doc = parse_json('{"aaa": {"bbb": "xyz"}}')
    ref = JSONRef(doc).locate_child(doc["aaa"]["bbb"])
    assert ref is not None
    assert ref.pointer == JSONPointer("/aaa/bbb")
    assert ref.node is doc["aaa"]["bbb"]
    assert ref.parent().node is doc["aaa"]

    assert JSONRef(doc).locate_child(doc) == JSONRef(doc)
    assert JSONRef(doc).locate_child({"bbb": "xyz"}) is None


def test_locate_child_from_nested():
    doc = _nested()
    ref = JSONRef(doc).child("field2", OBJECT)
    found = ref.locate_child(doc["field2"]["bbb"])
    assert found is not None
    assert found.pointer == JSONPointer("/field2/bbb")
    assert found.base is doc
    assert found.parent().parent().node is doc


def test_equality():
    doc = _nested()
    other = _nested()
    assert JSONRef.of(doc, "/field2") == JSONRef(doc).child("field2")
    assert hash(JSONRef.of(doc, "/field2")) == hash(JSONRef(doc).child("field2"))
    assert JSONRef.of(doc, "/field2") != JSONRef.of(other, "/field2")
    assert JSONRef(doc) != JSONRef(doc["field2"])
    assert JSONRef(doc).child("field2").rebase() != JSONRef(doc).child("field2")


def test_repr():
    ref = JSONRef({"a": "mango"}).child("a", STRING)
    assert repr(ref) == 'JSONRef<String>(pointer="/a", node="mango")'
