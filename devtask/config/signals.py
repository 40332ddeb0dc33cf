"""Parsing of enable/path override signals.

An override signal is a single string setting that either switches a
feature off, switches it on at its default location, or switches it on
at a custom filesystem path.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DISABLE_VALUES = ("0", "false")
ENABLE_VALUES = ("1", "true")


class SignalMode(Enum):
    DISABLED = "disabled"
    DEFAULT = "default"
    CUSTOM = "custom"


@dataclass(frozen=True)
class OverrideSignal:
    mode: SignalMode
    raw: str | None = None

    @property
    def enabled(self) -> bool:
        return self.mode is not SignalMode.DISABLED

    def resolve_path(self, default: Path, cwd: Path) -> Path | None:
        """Return the absolute path this signal points at, or None if disabled.

        Custom paths are resolved against *cwd*, not against any project root.
        """
        if self.mode is SignalMode.DISABLED:
            return None
        if self.mode is SignalMode.DEFAULT:
            return default
        path = Path(self.raw)
        if not path.is_absolute():
            path = cwd / path
        return Path(os.path.abspath(path))


def parse_signal(value: str | None) -> OverrideSignal:
    """Classify a raw setting value.

    Only the decision is trimmed and case-insensitive; a custom path is kept as given.
    """
    if value is None:
        return OverrideSignal(SignalMode.DISABLED)

    stripped = value.strip()
    decision = stripped.lower()
    if not decision or decision in DISABLE_VALUES:
        return OverrideSignal(SignalMode.DISABLED, value)
    if decision in ENABLE_VALUES:
        return OverrideSignal(SignalMode.DEFAULT, value)
    return OverrideSignal(SignalMode.CUSTOM, value)
