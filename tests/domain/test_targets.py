"""Tests for existence-checking assignment targets."""

from __future__ import annotations

import math
from types import SimpleNamespace
from typing import Any

import pytest

from presence.domain.errors import TargetError
from presence.domain.targets import (
    AttrTarget,
    ItemTarget,
    NameTarget,
    assign_if_absent,
    attr,
    item,
    resolve_target,
    var,
)


class _Recorder:
    """Container that records every read and write."""

    def __init__(self, **data: Any) -> None:
        self.data = data
        self.reads: list[Any] = []
        self.writes: list[tuple[Any, Any]] = []

    def __getitem__(self, key: Any) -> Any:
        self.reads.append(key)
        return self.data[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self.writes.append((key, value))
        self.data[key] = value


class TestAssignIfAbsent:
    def test_absent_value_replaced(self, counter) -> None:
        default = counter(30)
        cfg = SimpleNamespace(timeout=None)
        assert assign_if_absent(attr(cfg, "timeout"), default) == 30
        assert cfg.timeout == 30
        assert default.calls == 1

    def test_present_value_kept(self, counter) -> None:
        default = counter(30)
        cfg = SimpleNamespace(timeout=0)
        assert assign_if_absent(attr(cfg, "timeout"), default) == 0
        assert cfg.timeout == 0
        assert default.calls == 0

    def test_nan_item_replaced(self) -> None:
        scores = {"a": math.nan}
        assert assign_if_absent(item(scores, "a"), lambda: 0.0) == 0.0
        assert scores == {"a": 0.0}

    def test_list_slot(self) -> None:
        values = [1, None, 3]
        assign_if_absent(item(values, 1), lambda: 2)
        assert values == [1, 2, 3]

    def test_variable_slot(self) -> None:
        scope: dict[str, Any] = {"retries": Ellipsis}
        assert assign_if_absent(var(scope, "retries"), lambda: 3) == 3
        assert scope["retries"] == 3

    def test_location_read_and_written_once(self, counter) -> None:
        box = _Recorder(k=None)
        key = counter("k")
        assign_if_absent(item(box, key()), lambda: "v")
        assert box.reads == ["k"]
        assert box.writes == [("k", "v")]
        assert key.calls == 1

    def test_present_value_is_stored_back(self) -> None:
        box = _Recorder(k="kept")
        assign_if_absent(item(box, "k"), lambda: "unused")
        assert box.writes == [("k", "kept")]


class TestUnboundLocations:
    def test_missing_name_raises_name_error(self, counter) -> None:
        default = counter(1)
        with pytest.raises(NameError, match="'x' is not defined"):
            assign_if_absent(var({}, "x"), default)
        assert default.calls == 0

    def test_missing_attribute_raises(self) -> None:
        with pytest.raises(AttributeError):
            assign_if_absent(attr(SimpleNamespace(), "x"), lambda: 1)

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            assign_if_absent(item({}, "x"), lambda: 1)


class TestTargetErrors:
    @pytest.mark.parametrize(
        "target",
        [
            "x",
            None,
            42,
            NameTarget((("x", None),), "x"),
            NameTarget({}, "not an identifier"),
            NameTarget({}, 3),
            AttrTarget(SimpleNamespace(), 3),
            ItemTarget((None, 1), 0),
            ItemTarget("abc", 0),
            ItemTarget(frozenset(), 0),
        ],
    )
    def test_non_assignable_targets(self, target: Any, counter) -> None:
        default = counter("unused")
        with pytest.raises(TargetError):
            assign_if_absent(target, default)
        assert default.calls == 0

    def test_target_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            resolve_target(object())

    def test_resolve_returns_target(self) -> None:
        target = item({}, "k")
        assert resolve_target(target) is target

    def test_target_checked_before_default_callable(self) -> None:
        with pytest.raises(TargetError):
            assign_if_absent("x", "not callable")  # type: ignore[arg-type]

    def test_non_callable_default_rejected(self) -> None:
        with pytest.raises(TypeError, match="zero-argument callable"):
            assign_if_absent(item({"k": None}, "k"), 5)  # type: ignore[arg-type]
