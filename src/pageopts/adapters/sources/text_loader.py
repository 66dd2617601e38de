from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True, slots=True)
class TextLoader:
    """
    Loads a local HTML document from disk.

    - Tries utf-8 first, falls back to latin-1 if needed.
    - Skips files larger than max_bytes (best-effort guardrail).
    """
    max_bytes: int = 10_000_000  # 10MB
    prefer_encoding: str = "utf-8"
    fallback_encoding: str = "latin-1"

    def load(self, path: Path) -> Optional[str]:
        try:
            size = path.stat().st_size
            if size > self.max_bytes:
                return None
            data = path.read_bytes()
        except OSError:
            return None

        # Strip a UTF-8 BOM so it doesn't end up in front of <html>
        if data.startswith(b"\xef\xbb\xbf"):
            data = data[3:]

        try:
            return data.decode(self.prefer_encoding, errors="strict")
        except UnicodeDecodeError:
            # latin-1 maps every byte, so this can't fail
            return data.decode(self.fallback_encoding, errors="replace")
