"""Tests for the save file envelope (PersistentStorage)."""

import logging
import struct

import pytest

from shapeworld.color import WHITE, Color
from shapeworld.config.persistence import DEFAULT_LEVEL_INDEX
from shapeworld.contracts import SAVE_VERSION
from shapeworld.exceptions import (
    PersistenceError,
    SaveFileNotFoundError,
    StreamExhaustedError,
    UnsupportedFutureVersionError,
)
from shapeworld.persistence.storage import LoadReport, PersistentStorage
from shapeworld.roster import Roster


def _populate(roster, pool):
    for shape_id, material_id, color in [
        (1, 0, Color(1.0, 0.0, 0.0, 1.0)),
        (2, 2, Color(0.0, 0.5, 1.0, 1.0)),
        (3, 1, Color(0.25, 0.25, 0.75, 0.5)),
    ]:
        shape = pool.get(shape_id, material_id)
        shape.set_color(color)
        roster.add(shape)


class TestSave:
    def test_file_starts_with_negative_version(self, storage, roster, pool, save_path):
        _populate(roster, pool)
        roster.level_index = 2

        result = storage.save(roster)

        assert result.is_ok()
        assert result.unwrap() == save_path
        data = save_path.read_bytes()
        tag, count, level = struct.unpack_from("<3i", data)
        assert tag == -SAVE_VERSION
        assert count == 3
        assert level == 2
        assert len(data) == 12 + 3 * (8 + 16)

    def test_save_always_writes_current_layout(self, storage, roster, pool, levels):
        shape = pool.get(1, 2)
        roster.add(shape)
        roster.level_index = 2

        with pytest.raises(TypeError):
            storage.save(roster, version=1)  # type: ignore[call-arg]
        storage.save(roster)

        restored = Roster(pool, levels)
        report = storage.load(restored).unwrap()
        assert report.version == SAVE_VERSION
        assert [(s.shape_id, s.material_id) for s in restored] == [(1, 2)]
        assert restored.level_index == 2

    def test_save_overwrites_whole_file(self, storage, roster, pool, save_path):
        _populate(roster, pool)
        storage.save(roster)
        roster.clear()
        storage.save(roster)
        assert len(save_path.read_bytes()) == 12

    def test_failed_save_keeps_previous_file(self, storage, roster, pool, save_path):
        _populate(roster, pool)
        storage.save(roster)
        previous = save_path.read_bytes()

        class Exploding:
            def save(self, writer):
                writer.write_int(1)
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            storage.save(Exploding())

        assert save_path.read_bytes() == previous
        assert not save_path.with_name(save_path.name + ".tmp").exists()

    def test_unwritable_location_returns_err(self, tmp_path, roster):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")
        storage = PersistentStorage(blocker / "saveFile")

        result = storage.save(roster)

        assert result.is_err()
        assert isinstance(result.error, PersistenceError)


class TestLoad:
    def test_round_trip_through_file(self, storage, roster, pool, levels):
        _populate(roster, pool)
        roster.level_index = 2
        expected = [(s.shape_id, s.material_id, s.color) for s in roster]
        storage.save(roster)

        restored = Roster(pool, levels)
        result = storage.load(restored)

        assert result.is_ok()
        assert result.unwrap() == LoadReport(
            version=SAVE_VERSION, legacy=False, shape_count=3, level_index=2
        )
        assert [(s.shape_id, s.material_id, s.color) for s in restored] == expected
        assert restored.level_index == 2
        assert levels.requested == [2]

    def test_color_survives_round_trip_exactly(self, storage, roster, pool, levels):
        shape = pool.get(0, 1)
        shape.set_color(Color(0.1, 0.2, 0.3, 1.0))
        roster.add(shape)
        storage.save(roster)

        restored = Roster(pool, levels)
        storage.load(restored).unwrap()

        assert restored[0].color == shape.color

    def test_legacy_count_first_file(self, storage, roster, levels, raw_save, save_path):
        raw_save.int(5).write(save_path)

        result = storage.load(roster)

        report = result.unwrap()
        assert report.legacy
        assert report.version == -5
        assert report.shape_count == 5
        assert len(roster) == 5
        for shape in roster:
            assert shape.shape_id == 0
            assert shape.material_id == 0
            assert shape.color == WHITE
        assert roster.level_index == DEFAULT_LEVEL_INDEX
        assert levels.requested == [DEFAULT_LEVEL_INDEX]

    def test_legacy_file_with_zero_shapes(self, storage, roster, pool, raw_save, save_path):
        _populate(roster, pool)
        raw_save.int(0).write(save_path)

        report = storage.load(roster).unwrap()

        assert report.version == 0
        assert report.legacy
        assert len(roster) == 0

    def test_version_one_defaults_color(self, storage, roster, raw_save, save_path):
        raw_save.int(-1).int(2).int(1).int(2).int(2).int(0).write(save_path)

        report = storage.load(roster).unwrap()

        assert report.version == 1
        assert not report.legacy
        assert report.level_index == DEFAULT_LEVEL_INDEX
        assert [(s.shape_id, s.material_id) for s in roster] == [(1, 2), (2, 0)]
        assert all(s.color == WHITE for s in roster)

    def test_version_two_reads_level_and_color(self, storage, roster, raw_save, save_path):
        raw_save.int(-2).int(1).int(2).int(0).int(1).color(0.5, 0.25, 1.0, 1.0).write(save_path)

        report = storage.load(roster).unwrap()

        assert report.level_index == 2
        assert roster[0].color == Color(0.5, 0.25, 1.0, 1.0)

    def test_future_version_leaves_roster_untouched(
        self, storage, roster, pool, levels, raw_save, save_path, caplog
    ):
        _populate(roster, pool)
        roster.level_index = 2
        before = roster.shapes
        raw_save.int(-(SAVE_VERSION + 1)).int(1).int(1).int(0).int(0).color(0, 0, 0).write(
            save_path
        )

        with caplog.at_level(logging.WARNING, logger="shapeworld.persistence.storage"):
            result = storage.load(roster)

        assert result.is_err()
        assert isinstance(result.error, UnsupportedFutureVersionError)
        assert result.error.version == SAVE_VERSION + 1
        assert roster.shapes == before
        assert all(s.active for s in before)
        assert roster.level_index == 2
        assert levels.requested == []
        assert "Unsupported future save version" in caplog.text

    def test_truncated_file_reports_and_keeps_roster(
        self, storage, roster, pool, raw_save, save_path
    ):
        _populate(roster, pool)
        before = roster.shapes
        raw_save.int(-2).int(3).int(1).int(0).int(0).color(1, 1, 1).int(1).write(save_path)

        result = storage.load(roster)

        assert isinstance(result.error, StreamExhaustedError)
        assert roster.shapes == before

    def test_empty_file_is_exhausted(self, storage, roster, save_path):
        save_path.parent.mkdir(parents=True)
        save_path.write_bytes(b"")
        assert isinstance(storage.load(roster).error, StreamExhaustedError)

    def test_missing_file(self, storage, roster):
        result = storage.load(roster)
        assert isinstance(result.error, SaveFileNotFoundError)
        assert not storage.exists()

    def test_exists_after_save(self, storage, roster):
        storage.save(roster)
        assert storage.exists()
