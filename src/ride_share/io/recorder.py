# ride_share/io/recorder.py
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Protocol

from ride_share.io.business_events import BizEvent

log = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, ev: BizEvent) -> None: ...


def event_row(ev: BizEvent) -> dict:
    """Flatten a business event into one JSON-ready row keyed by `event`."""
    row = asdict(ev)
    return {"event": row.pop("name"), **row}


class JsonlEventSink:
    """Appends one JSON object per business event to a file, in emission order."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.written = 0
        self._fp = None

    def __enter__(self):
        self._fp = self.path.open("w", encoding="utf-8")
        return self

    def __exit__(self, *exc):
        self.close()

    def write(self, ev: BizEvent) -> None:
        if self._fp is None:
            raise OSError(f"event log {self.path} is not open")
        self._fp.write(json.dumps(event_row(ev)) + "\n")
        self.written += 1

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None


class MemorySink:
    def __init__(self):
        self.events: list[BizEvent] = []

    def write(self, ev: BizEvent) -> None:
        self.events.append(ev)


class Recorder:
    def __init__(self, *sinks: Sink):
        if not sinks:
            raise ValueError("Recorder needs at least one sink")
        self.sinks = sinks
        self.emitted = 0

    def emit(self, ev: BizEvent):
        self.emitted += 1
        for s in self.sinks:
            try:
                s.write(ev)
            except OSError:
                # a failing sink does not stop the others
                log.exception("sink %s failed to write %s", type(s).__name__, ev.name)
