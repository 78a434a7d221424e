"""Data models for the relay pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RelayOutcome:
    """What the pipeline did with one inbound event."""

    actionable: bool
    forwarded: bool = False
    error: str | None = None
