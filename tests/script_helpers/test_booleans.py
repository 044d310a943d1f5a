from __future__ import annotations

import pytest

from script_helpers.booleans import parse_bool


@pytest.mark.parametrize("value", ["true", " TRUE ", "$true", "yes", "Y", "on", "1", 1, True])
def test_truthy_values(value: object) -> None:
    assert parse_bool(value) is True  # type: ignore[arg-type]


@pytest.mark.parametrize("value", ["false", "$False", "no", "n", "OFF", "0", 0, False])
def test_falsy_values(value: object) -> None:
    assert parse_bool(value) is False  # type: ignore[arg-type]


def test_blank_uses_default() -> None:
    assert parse_bool(None, default=True) is True
    assert parse_bool("  ", default=False) is False


@pytest.mark.parametrize("value", [None, "", "maybe", 2])
def test_unrecognised_values_raise(value: object) -> None:
    with pytest.raises(ValueError):
        parse_bool(value)  # type: ignore[arg-type]
