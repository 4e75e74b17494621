"""
Log sinks for simulation records.

Features:
- Buffered CSV writes, flushed on buffer size or on demand
- Bounded in-memory buffer for inspection in tests and notebooks
- Graceful handling of file errors
- Reading logs back into numpy arrays
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional, Sequence
from pathlib import Path
from collections import deque
import csv
import numpy as np

from control_sim.logging.records import LogRecord


class LogSink(ABC):
    """Destination for an ordered sequence of log records."""

    @abstractmethod
    def write_records(self, records: Sequence[LogRecord]) -> None:
        """Persist records in order."""
        pass

    def close(self) -> None:
        """Release any resource held by the sink."""
        pass


class CSVLogger(LogSink):
    """
    CSV logger with buffering for high-frequency data logging.

    Example:
        >>> logger = CSVLogger("data.csv", columns=["time", "position"])
        >>> logger.log({"time": 0.0, "position": 0.1})
        >>> logger.close()
    """

    def __init__(
        self,
        file_path: str,
        columns: Optional[List[str]] = None,
        buffer_size: int = 100,
        append: bool = False
    ):
        """
        Initialize CSV logger.

        Args:
            file_path: Path to CSV file
            columns: List of column names (LogRecord columns if None)
            buffer_size: Number of rows to buffer before writing
            append: If True, append to existing file
        """
        columns = columns if columns is not None else LogRecord.columns()
        if not columns:
            raise ValueError("columns cannot be empty")
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")

        self._file_path = Path(file_path)
        self._columns = list(columns)
        self._buffer_size = buffer_size

        self._buffer: deque = deque()
        self._total_rows = 0

        # Create directory if needed
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        write_header = not append or not self._file_path.exists() or \
            self._file_path.stat().st_size == 0

        self._file = open(self._file_path, 'a' if append else 'w', newline='')
        self._writer = csv.DictWriter(self._file, fieldnames=self._columns)

        if write_header:
            self._writer.writeheader()

        self._closed = False

    def log(self, data: Dict[str, Any]) -> None:
        """
        Log a row of data.

        Args:
            data: Dictionary mapping column names to values
                  Missing columns will be filled with empty string
        """
        self.log_batch([data])

    def log_batch(self, data_list: Sequence[Dict[str, Any]]) -> None:
        """
        Log multiple rows of data.

        Args:
            data_list: List of row dictionaries
        """
        if self._closed:
            raise RuntimeError("Logger is closed")

        self._buffer.extend(
            {col: data.get(col, '') for col in self._columns}
            for data in data_list
        )
        self._total_rows += len(data_list)

        if len(self._buffer) >= self._buffer_size:
            self.flush()

    def write_records(self, records: Sequence[LogRecord]) -> None:
        """
        Write log records straight to disk, bypassing the row buffer.

        Rows are not kept for retry when the write fails; the caller still
        holds the records and decides whether to send them again.

        Raises:
            RuntimeError: If the logger is closed or the write fails
        """
        if self._closed:
            raise RuntimeError("Logger is closed")

        self.flush()
        rows = [{col: r.to_dict().get(col, '') for col in self._columns} for r in records]
        try:
            self._writer.writerows(rows)
            self._file.flush()
        except OSError as e:
            raise RuntimeError(f"Failed to write to CSV: {e}") from e
        self._total_rows += len(rows)

    def flush(self) -> None:
        """Flush buffer to disk."""
        if not self._buffer or self._closed:
            return

        rows_to_write = list(self._buffer)
        self._buffer.clear()

        try:
            self._writer.writerows(rows_to_write)
            self._file.flush()
        except OSError as e:
            # Re-add rows to buffer on failure
            self._buffer.extendleft(reversed(rows_to_write))
            raise RuntimeError(f"Failed to write to CSV: {e}") from e

    def close(self) -> None:
        """Close logger and flush remaining data."""
        if self._closed:
            return

        try:
            self.flush()
        finally:
            self._closed = True
            self._file.close()

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def total_rows(self) -> int:
        """Get total number of logged rows."""
        return self._total_rows

    @property
    def buffer_count(self) -> int:
        """Get current buffer size."""
        return len(self._buffer)

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class DataBuffer(LogSink):
    """
    In-memory bounded buffer of log rows.

    Keeps recent history without unbounded memory growth.
    """

    def __init__(self, max_size: int = 10000, columns: Optional[List[str]] = None):
        """
        Initialize data buffer.

        Args:
            max_size: Maximum number of rows to store
            columns: Column order used by to_csv (LogRecord columns if None)
        """
        if max_size < 1:
            raise ValueError("max_size must be at least 1")

        self._max_size = max_size
        self._columns = columns if columns is not None else LogRecord.columns()
        self._buffer: deque = deque(maxlen=max_size)

    def write_records(self, records: Sequence[LogRecord]) -> None:
        self._buffer.extend(r.to_dict() for r in records)

    def get_all(self) -> List[Dict[str, Any]]:
        """Get all buffered rows as a list."""
        return list(self._buffer)

    def get_column(self, column: str) -> List[Any]:
        """Get all values for a specific column."""
        return [row.get(column) for row in self._buffer]

    def clear(self) -> None:
        self._buffer.clear()

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def is_full(self) -> bool:
        """Check if buffer is at max capacity."""
        return len(self._buffer) >= self._max_size

    def to_csv(self, file_path: str) -> None:
        """
        Export buffer contents to CSV file.

        Args:
            file_path: Output file path
        """
        with open(file_path, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=self._columns)
            writer.writeheader()
            writer.writerows(self._buffer)


def read_log_csv(file_path: str) -> Dict[str, np.ndarray]:
    """
    Read a harness CSV log back into column arrays.

    Args:
        file_path: CSV file with a header row

    Returns:
        Dictionary mapping column names to float arrays, in the same shape
        as ``SimulationHarness.to_arrays()``

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If a LogRecord column is missing or a value is not numeric
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {file_path}")

    with open(path, 'r', newline='') as f:
        reader = csv.DictReader(f)
        header = reader.fieldnames or []
        missing = [col for col in LogRecord.columns() if col not in header]
        if missing:
            raise ValueError(f"CSV is missing columns: {', '.join(missing)}")

        columns: Dict[str, List[float]] = {col: [] for col in header}
        for row in reader:
            for col in header:
                columns[col].append(float(row[col]))

    return {col: np.array(values, dtype=float) for col, values in columns.items()}
