"""Leveled diagnostic traces emitted by draw-poker agents."""
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

try:  # Optional dependency for Parquet output
    import pyarrow as pa  # type: ignore
    import pyarrow.parquet as pq  # type: ignore
except Exception:  # pragma: no cover - pyarrow is optional
    pa = None  # type: ignore
    pq = None  # type: ignore

LEVELS = {"debug": 10, "info": 20}


@dataclass
class TraceEvent:
    """Single diagnostic line written by an agent."""

    timestamp: str
    game_id: str
    player: str
    level: str
    round: int
    message: str

    def as_dict(self) -> Dict:
        return {
            "timestamp": self.timestamp,
            "game_id": self.game_id,
            "player": self.player,
            "level": self.level,
            "round": self.round,
            "message": self.message,
        }


class _BaseWriter:
    def append(self, event: Dict[str, Any]) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def close(self) -> None:  # pragma: no cover - interface
        return None


class NullWriter(_BaseWriter):
    def append(self, event: Dict[str, Any]) -> None:
        return None


class MemoryWriter(_BaseWriter):
    """Keeps events in a list; handy for inspecting traces in tests."""

    def __init__(self) -> None:
        self.events: List[Dict[str, Any]] = []

    def append(self, event: Dict[str, Any]) -> None:
        self.events.append(event)


class StdoutWriter(_BaseWriter):
    def append(self, event: Dict[str, Any]) -> None:
        print(json.dumps(event, separators=(",", ":"), ensure_ascii=False))


class JSONLWriter(_BaseWriter):
    def __init__(self, path: Path) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = self.path.open("a", encoding="utf-8")

    def append(self, event: Dict[str, Any]) -> None:
        self._handle.write(json.dumps(event, ensure_ascii=False) + "\n")
        self._handle.flush()

    def close(self) -> None:
        self._handle.close()


class ParquetWriter(_BaseWriter):
    def __init__(self, path: Path) -> None:
        if pq is None or pa is None:  # pragma: no cover - import-time guard
            raise RuntimeError("pyarrow is required for Parquet logging but is not installed")
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._writer: Optional["pq.ParquetWriter"] = None

    def append(self, event: Dict[str, Any]) -> None:
        if pa is None or pq is None:  # pragma: no cover
            return
        table = pa.Table.from_pylist([event])
        if self._writer is None:
            self._writer = pq.ParquetWriter(self.path, table.schema)
        self._writer.write_table(table)

    def close(self) -> None:
        if self._writer is not None:
            self._writer.close()
            self._writer = None


class AgentLogger:
    """Facade with info/debug entry points over an append-only writer.

    ``round`` and ``player_name`` are per-seat state set by the owning agent,
    so every seat needs its own logger. Seats may still share one writer.
    """

    def __init__(
        self,
        writer: _BaseWriter,
        *,
        game_id: str = "",
        player_name: str = "",
        level: str = "debug",
    ) -> None:
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self._writer = writer
        self.game_id = game_id
        self.player_name = player_name
        self.level = level
        self.round = 0

    def _emit(self, level: str, message: str) -> None:
        if LEVELS[level] < LEVELS[self.level]:
            return
        event = TraceEvent(
            timestamp=datetime.now(timezone.utc).isoformat(),
            game_id=self.game_id,
            player=self.player_name,
            level=level,
            round=self.round,
            message=f"<Round: {self.round}>: {message}",
        )
        self._writer.append(event.as_dict())

    def info(self, message: str) -> None:
        self._emit("info", message)

    def debug(self, message: str) -> None:
        self._emit("debug", message)

    def close(self) -> None:
        self._writer.close()


def null_logger() -> AgentLogger:
    return AgentLogger(NullWriter())


def create_logger(
    mode: Optional[str],
    *,
    destination: Optional[Path] = None,
    game_id: str = "",
    player_name: str = "",
    level: str = "debug",
) -> AgentLogger:
    """Factory that builds a logger for the requested mode."""

    normalized = (mode or "null").lower()
    if normalized == "null":
        writer: _BaseWriter = NullWriter()
    elif normalized == "memory":
        writer = MemoryWriter()
    elif normalized == "stdout":
        writer = StdoutWriter()
    elif normalized == "jsonl":
        if not destination:
            raise ValueError("JSONL logging requires a destination path")
        writer = JSONLWriter(Path(destination))
    elif normalized == "parquet":
        if not destination:
            raise ValueError("Parquet logging requires a destination path")
        writer = ParquetWriter(Path(destination))
    else:
        raise ValueError(f"Unknown trace log mode: {mode}")

    return AgentLogger(writer, game_id=game_id, player_name=player_name, level=level)
