"""Tests for the bounded calculation history."""
import dataclasses

import pytest

from history_manager import HistoryEntry, HistoryLog


def test_record_is_most_recent_first():
    log = HistoryLog()
    log.record("1 + 1", "2")
    log.record("2 × 3", "6")
    assert [e.expression for e in log.entries()] == ["2 × 3", "1 + 1"]


def test_capacity_evicts_oldest():
    log = HistoryLog(capacity=3)
    for i in range(5):
        log.record(f"{i} + 0", str(i))
    assert len(log) == 3
    assert [e.result for e in log] == ["4", "3", "2"]


def test_default_capacity_is_ten():
    log = HistoryLog()
    for i in range(15):
        log.record(f"{i} + 0", str(i))
    assert len(log) == 10
    assert log.entries()[-1].result == "5"


def test_clear():
    log = HistoryLog()
    log.record("1 + 1", "2")
    log.clear()
    assert len(log) == 0
    assert log.entries() == []


def test_format_entries():
    log = HistoryLog()
    log.record("10 ÷ 4", "2.5")
    assert log.format_entries() == ["10 ÷ 4 = 2.5"]


def test_entries_are_immutable():
    entry = HistoryLog().record("1 + 1", "2")
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.result = "3"
    assert entry == HistoryEntry("1 + 1", "2")


def test_entries_returns_a_copy():
    log = HistoryLog()
    log.record("1 + 1", "2")
    log.entries().clear()
    assert len(log) == 1


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        HistoryLog(capacity=0)
