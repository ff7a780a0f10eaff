from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjkitConfig:
    json_indent: int | None = None
    json_sort_keys: bool = False
    json_ensure_ascii: bool = False
    log_level: str = "WARNING"

    @property
    def json_separators(self) -> tuple[str, str]:
        """Compact separators unless indenting, where a space follows ':'."""
        if self.json_indent is None:
            return (",", ":")
        return (",", ": ")
