"""Tests for read-only save file inspection."""

import pytest

from shapeworld.color import Color
from shapeworld.contracts import SAVE_VERSION
from shapeworld.exceptions import StreamExhaustedError
from shapeworld.persistence import inspect_save_file


def test_inspect_current_save(storage, roster, pool, save_path):
    shape = pool.get(2, 1)
    shape.set_color(Color(0.5, 0.25, 0.0, 1.0))
    roster.add(shape)
    roster.level_index = 2
    storage.save(roster)

    summary = inspect_save_file(save_path)

    assert summary.tag == -SAVE_VERSION
    assert summary.version == SAVE_VERSION
    assert summary.supported
    assert not summary.legacy
    assert not summary.truncated
    assert summary.size_bytes == 12 + 24
    assert summary.shape_count == 1
    assert summary.level_index == 2
    assert summary.records[0].shape_id == 2
    assert summary.records[0].material_id == 1
    assert summary.records[0].color == (0.5, 0.25, 0.0, 1.0)


def test_inspect_does_not_touch_pool(storage, roster, pool, save_path):
    roster.add(pool.get(0, 0))
    storage.save(roster)
    stats = pool.get_stats()

    inspect_save_file(save_path)

    assert pool.get_stats() == stats
    assert len(roster) == 1


def test_inspect_legacy_file(raw_save, save_path):
    raw_save.int(2).write(save_path)

    summary = inspect_save_file(save_path)

    assert summary.legacy
    assert summary.version == -2
    assert summary.shape_count == 2
    assert summary.level_index == 1
    assert [(r.shape_id, r.material_id, r.color) for r in summary.records] == [
        (0, 0, None),
        (0, 0, None),
    ]


def test_inspect_version_one_has_no_color(raw_save, save_path):
    raw_save.int(-1).int(1).int(2).int(2).write(save_path)

    summary = inspect_save_file(save_path)

    assert summary.records[0].shape_id == 2
    assert summary.records[0].color is None


def test_inspect_future_file(raw_save, save_path):
    raw_save.int(-(SAVE_VERSION + 5)).int(10).write(save_path)

    summary = inspect_save_file(save_path)

    assert not summary.supported
    assert summary.version == SAVE_VERSION + 5
    assert summary.shape_count is None
    assert summary.records == []


def test_inspect_truncated_file(raw_save, save_path):
    raw_save.int(-2).int(3).int(1).int(0).int(0).color(1, 1, 1).int(1).write(save_path)

    summary = inspect_save_file(save_path)

    assert summary.truncated
    assert summary.shape_count == 3
    assert len(summary.records) == 1


def test_inspect_summary_serializes(raw_save, save_path):
    raw_save.int(-2).int(0).int(1).write(save_path)
    payload = inspect_save_file(save_path).model_dump()
    assert payload["records"] == []
    assert payload["level_index"] == 1


def test_inspect_missing_or_empty(save_path):
    with pytest.raises(FileNotFoundError):
        inspect_save_file(save_path)

    save_path.parent.mkdir(parents=True)
    save_path.write_bytes(b"\x01")
    with pytest.raises(StreamExhaustedError):
        inspect_save_file(save_path)
