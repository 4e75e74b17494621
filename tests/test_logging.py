"""
Unit tests for log records and sinks.
"""

import csv

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from control_sim.logging.csv_logger import CSVLogger, DataBuffer, read_log_csv
from control_sim.logging.records import LogRecord


def read_rows(path):
    with open(path, newline='') as f:
        return list(csv.DictReader(f))


def make_record(t: float) -> LogRecord:
    return LogRecord(time=t, position=0.1 * t, velocity=0.1, voltage=1.0, setpoint=1.0)


class TestLogRecord:
    """Test suite for LogRecord."""

    def test_columns(self):
        assert LogRecord.columns() == ['time', 'position', 'velocity', 'voltage', 'setpoint']

    def test_to_dict_follows_columns(self):
        assert list(make_record(1.0).to_dict()) == LogRecord.columns()


class TestCSVLogger:
    """Test suite for CSVLogger."""

    def test_header_and_rows(self, tmp_path):
        path = tmp_path / "log.csv"
        with CSVLogger(str(path), columns=['time', 'position']) as log:
            log.log({'time': 0.0, 'position': 0.1})
            log.log({'time': 0.1})

        rows = read_rows(path)
        assert rows == [
            {'time': '0.0', 'position': '0.1'},
            {'time': '0.1', 'position': ''},
        ]

    def test_default_columns(self, tmp_path):
        path = tmp_path / "log.csv"
        with CSVLogger(str(path)) as log:
            log.write_records([make_record(0.0), make_record(1.0)])

        rows = read_rows(path)
        assert list(rows[0]) == LogRecord.columns()
        assert len(rows) == 2

    def test_creates_directory(self, tmp_path):
        path = tmp_path / "a" / "b" / "log.csv"
        CSVLogger(str(path)).close()
        assert path.exists()

    def test_buffering(self, tmp_path):
        """Test rows are held until the buffer fills."""
        path = tmp_path / "log.csv"
        log = CSVLogger(str(path), columns=['time'], buffer_size=3)

        log.log({'time': 0})
        log.log({'time': 1})
        assert log.buffer_count == 2
        assert read_rows(path) == []

        log.log({'time': 2})
        assert log.buffer_count == 0
        assert len(read_rows(path)) == 3
        assert log.total_rows == 3
        log.close()

    def test_write_records_flushes(self, tmp_path):
        path = tmp_path / "log.csv"
        log = CSVLogger(str(path), buffer_size=1000)
        log.write_records([make_record(0.0)])
        assert log.buffer_count == 0
        assert len(read_rows(path)) == 1
        log.close()

    def test_append(self, tmp_path):
        """Test append mode keeps existing rows and writes no second header."""
        path = tmp_path / "log.csv"
        with CSVLogger(str(path), columns=['time']) as log:
            log.log({'time': 0})
        with CSVLogger(str(path), columns=['time'], append=True) as log:
            log.log({'time': 1})

        assert [r['time'] for r in read_rows(path)] == ['0', '1']

    def test_failed_write_records_keeps_nothing(self, tmp_path):
        """Test rows from a failed write_records are not queued for a later flush."""
        path = tmp_path / "log.csv"
        log = CSVLogger(str(path))
        writer = log._writer

        class FailingWriter:
            def writerows(self, rows):
                raise OSError("disk full")

        log._writer = FailingWriter()
        with pytest.raises(RuntimeError):
            log.write_records([make_record(0.0)])
        assert log.buffer_count == 0
        assert log.total_rows == 0

        log._writer = writer
        log.write_records([make_record(1.0)])
        log.close()

        assert [r['time'] for r in read_rows(path)] == ['1.0']

    def test_log_after_close(self, tmp_path):
        log = CSVLogger(str(tmp_path / "log.csv"))
        log.close()
        assert log.closed
        with pytest.raises(RuntimeError):
            log.log({'time': 0.0})

    def test_invalid_arguments(self, tmp_path):
        with pytest.raises(ValueError):
            CSVLogger(str(tmp_path / "a.csv"), columns=[])
        with pytest.raises(ValueError):
            CSVLogger(str(tmp_path / "b.csv"), buffer_size=0)


class TestDataBuffer:
    """Test suite for DataBuffer."""

    def test_write_and_read(self):
        buffer = DataBuffer()
        buffer.write_records([make_record(0.0), make_record(1.0)])
        assert len(buffer) == 2
        assert buffer.get_column('time') == [0.0, 1.0]
        assert buffer.get_all()[1] == make_record(1.0).to_dict()

    def test_bounded(self):
        """Test the oldest rows are dropped at capacity."""
        buffer = DataBuffer(max_size=3)
        buffer.write_records([make_record(float(t)) for t in range(5)])

        assert buffer.is_full
        assert buffer.get_column('time') == [2.0, 3.0, 4.0]

    def test_clear(self):
        buffer = DataBuffer()
        buffer.write_records([make_record(0.0)])
        buffer.clear()
        assert len(buffer) == 0
        assert not buffer.is_full

    def test_to_csv(self, tmp_path):
        path = tmp_path / "buffer.csv"
        buffer = DataBuffer()
        buffer.write_records([make_record(0.0), make_record(2.0)])

        buffer.to_csv(str(path))

        rows = read_rows(path)
        assert len(rows) == 2
        assert float(rows[1]['position']) == pytest.approx(0.2)

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            DataBuffer(max_size=0)


class TestReadLogCSV:
    """Test suite for read_log_csv."""

    def test_round_trip_through_csv(self, tmp_path):
        path = tmp_path / "log.csv"
        with CSVLogger(str(path)) as log:
            log.write_records([make_record(0.0), make_record(1.0), make_record(2.0)])

        arrays = read_log_csv(str(path))

        assert list(arrays) == LogRecord.columns()
        assert arrays["position"].tolist() == pytest.approx([0.0, 0.1, 0.2])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_log_csv(str(tmp_path / "absent.csv"))

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "log.csv"
        with CSVLogger(str(path), columns=["time", "position"]) as log:
            log.log({"time": 0.0, "position": 0.0})

        with pytest.raises(ValueError, match="velocity"):
            read_log_csv(str(path))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
