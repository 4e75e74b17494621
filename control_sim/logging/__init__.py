"""Log records and sinks for simulation output."""

from control_sim.logging.records import LogRecord
from control_sim.logging.csv_logger import LogSink, CSVLogger, DataBuffer, read_log_csv

__all__ = [
    "LogRecord",
    "LogSink",
    "CSVLogger",
    "DataBuffer",
    "read_log_csv",
]
