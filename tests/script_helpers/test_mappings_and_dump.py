"""Tests for mapping conversion and text dumping."""
from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import List

import pytest
from pydantic import BaseModel

from command_locator.models import DeclarationKind, DeclarationRecord
from script_helpers.dump import dump
from script_helpers.mappings import to_dict, to_str_dict

Point = namedtuple("Point", ["x", "y"])


@dataclass
class Inner:
    value: int


@dataclass
class Outer:
    name: str
    inner: Inner
    items: List[Inner] = field(default_factory=list)


class Model(BaseModel):
    name: str
    point: dict


def test_to_dict_dataclass_deep() -> None:
    obj = Outer(name="o", inner=Inner(1), items=[Inner(2)])
    assert to_dict(obj) == {"name": "o", "inner": {"value": 1}, "items": [{"value": 2}]}


def test_to_dict_shallow_keeps_nested_objects() -> None:
    inner = Inner(1)
    assert to_dict(Outer(name="o", inner=inner), deep=False)["inner"] is inner


def test_to_dict_other_record_shapes() -> None:
    assert to_dict(Point(1, 2)) == {"x": 1, "y": 2}
    assert to_dict(SimpleNamespace(a=1, _private=2)) == {"a": 1}
    assert to_dict(Model(name="m", point={"x": 1})) == {"name": "m", "point": {"x": 1}}


def test_to_dict_rejects_scalars() -> None:
    with pytest.raises(TypeError):
        to_dict(42)


def test_to_str_dict_drops_none() -> None:
    assert to_str_dict({1: True, "b": None, "c": 2.5}) == {"1": "True", "c": "2.5"}


def test_dump_aligns_keys() -> None:
    assert dump({"a": 1, "long": "x"}) == "a    : 1\nlong : x"


def test_dump_record_with_enum_and_nested_values() -> None:
    record = DeclarationRecord(name="Deploy", kind=DeclarationKind.ORCHESTRATION, source_path="/x.ps1", line=3)
    text = dump(record)
    assert "kind        : orchestration" in text
    assert text.splitlines()[0] == "name        : Deploy"
    assert dump({"p": Point(1, 2), "l": [1, 2], "n": None}) == "p : @{x=1; y=2}\nl : {1, 2}\nn : "


def test_dump_sequences() -> None:
    assert dump(["a", 1]) == "a\n1"
    assert dump([{"k": 1}, {"k": 2}]) == "k : 1\n\nk : 2"
    assert dump("plain") == "plain"
    assert dump(None) == ""
