"""Trace log of measurements made from the command line.

Each command appends one JSON object per line: when it ran, what was asked,
and either the result or the error that stopped it.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceEntry:
    """One command invocation and its outcome."""

    timestamp: str
    command: str
    inputs: Dict[str, Any]
    result: Optional[Dict[str, Any]] = None
    error: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def describe_error(exc: BaseException) -> Dict[str, Any]:
    described: Dict[str, Any] = {"type": type(exc).__name__, "message": str(exc)}
    for attr in ("offset", "codepoint"):
        value = getattr(exc, attr, None)
        if value is not None:
            described[attr] = value
    return described


@dataclass
class TraceLogger:
    """Append :class:`TraceEntry` records to a JSON-lines file."""

    path: Path
    entries: List[TraceEntry] = field(default_factory=list)

    def record(
        self,
        command: str,
        inputs: Dict[str, Any],
        result: Optional[Dict[str, Any]] = None,
        error: Optional[BaseException] = None,
    ) -> TraceEntry:
        entry = TraceEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            command=command,
            inputs=inputs,
            result=result,
            error=describe_error(error) if error is not None else None,
        )
        self.entries.append(entry)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(asdict(entry)) + "\n")
        return entry

    def read(self) -> List[TraceEntry]:
        """Load every entry in the file, including ones written by other runs."""
        if not self.path.exists():
            return []
        with self.path.open("r", encoding="utf-8") as handle:
            return [TraceEntry(**json.loads(line)) for line in handle if line.strip()]
