"""Exception assertion configuration file management.

Reads and writes the .exception_assert_config JSON file that controls how
failure details are rendered and which reporter the pytest fixture uses.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from exception_assert.expectation import DETAIL_STYLES

CONFIG_FILENAME = ".exception_assert_config"

REPORTER_NAMES = frozenset({"assert", "pytest", "context"})

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    "details": "traceback",
    "max_details_length": None,
    "reporter": "assert",
}


class AssertConfig:
    """Manages the .exception_assert_config JSON configuration file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        self._data: dict[str, Any] = dict(DEFAULT_CONFIG)
        if path is not None and path.exists():
            self._load()

    def _load(self) -> None:
        """Load config from the file."""
        assert self.path is not None
        try:
            text = self.path.read_text()
            data = json.loads(text)
            if isinstance(data, dict):
                self._data = {**DEFAULT_CONFIG, **data}
        except (json.JSONDecodeError, OSError):
            self._data = dict(DEFAULT_CONFIG)

    def save(self) -> None:
        """Write config to the file."""
        if self.path is None:
            raise ValueError("No config file path specified")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._data, f, indent=2)
            f.write("\n")

    @property
    def config(self) -> dict[str, Any]:
        """Get the full configuration dict."""
        return dict(self._data)

    @property
    def details(self) -> str:
        """Get the failure details style (``traceback`` or ``repr``)."""
        val = self._data.get("details", DEFAULT_CONFIG["details"])
        if val not in DETAIL_STYLES:
            raise ValueError(f"Invalid details style: {val!r}")
        return str(val)

    @property
    def max_details_length(self) -> int | None:
        """Get the details truncation length (None = unlimited)."""
        val = self._data.get("max_details_length", DEFAULT_CONFIG["max_details_length"])
        return int(val) if val is not None else None

    @property
    def reporter(self) -> str:
        """Get the reporter name used by the pytest fixture."""
        val = self._data.get("reporter", DEFAULT_CONFIG["reporter"])
        if val not in REPORTER_NAMES:
            raise ValueError(f"Invalid reporter: {val!r}")
        return str(val)

    def set_config(
        self,
        details: str | None = None,
        max_details_length: int | None = None,
        reporter: str | None = None,
    ) -> None:
        """Update configuration values."""
        if details is not None:
            if details not in DETAIL_STYLES:
                raise ValueError(f"Invalid details style: {details!r}")
            self._data["details"] = details
        if max_details_length is not None:
            self._data["max_details_length"] = max_details_length
        if reporter is not None:
            if reporter not in REPORTER_NAMES:
                raise ValueError(f"Invalid reporter: {reporter!r}")
            self._data["reporter"] = reporter
