"""Trace sinks for agent diagnostics."""

from .trace_logger import (
    AgentLogger,
    JSONLWriter,
    MemoryWriter,
    NullWriter,
    ParquetWriter,
    StdoutWriter,
    TraceEvent,
    create_logger,
    null_logger,
)

__all__ = [
    "AgentLogger",
    "JSONLWriter",
    "MemoryWriter",
    "NullWriter",
    "ParquetWriter",
    "StdoutWriter",
    "TraceEvent",
    "create_logger",
    "null_logger",
]
