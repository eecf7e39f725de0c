"""Tunable constants for the draw-poker betting and exchange policies."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict, Optional

PAIR_SCAN_MODES = ("adjacent", "any")


@dataclass
class PolicyConfig:
    # raise granularity, reapplied at every round start
    bet_unit: int = 1

    # first betting phase
    first_fold_divisor: float = 10
    first_call_divisor: float = 4
    first_raise_multiplier: int = 800

    # second betting phase
    second_call_divisor: float = 4
    second_raise_divisor: float = 15
    second_hold_divisor: float = 3
    second_raise_multiplier: int = 4000
    second_strong_raise: int = 15000

    # 0 keeps the all-in branch disabled
    all_in_probability: float = 0.0
    seed: Optional[int] = None

    pair_scan: str = "adjacent"
    strict_phases: bool = False

    def __post_init__(self) -> None:
        if self.pair_scan not in PAIR_SCAN_MODES:
            raise ValueError(
                f"pair_scan must be one of {PAIR_SCAN_MODES}, got {self.pair_scan!r}"
            )
        if not 0.0 <= self.all_in_probability <= 1.0:
            raise ValueError("all_in_probability must be within [0, 1]")
        for name in (
            "first_fold_divisor",
            "first_call_divisor",
            "second_call_divisor",
            "second_raise_divisor",
            "second_hold_divisor",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

    @classmethod
    def from_dict(cls, data: Dict) -> "PolicyConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown policy config keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def load(cls, path: Optional[Path]) -> "PolicyConfig":
        if not path:
            return cls()
        return cls.from_dict(json.loads(Path(path).read_text()))

    def as_dict(self) -> Dict:
        return asdict(self)
