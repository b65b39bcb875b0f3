# tests/helpers.py

from __future__ import annotations

import json
from pathlib import Path


def write_raw(path: Path, payload: object) -> None:
    """Write arbitrary JSON to the storage file, bypassing TaskStore."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")


def deny_stat(monkeypatch, name: str) -> None:
    """Make Path.stat fail with EACCES for files called `name`, as an unsearchable parent dir would."""
    real_stat = Path.stat

    def stat(self, *args, **kwargs):
        if self.name == name:
            raise PermissionError(13, "Permission denied", str(self))
        return real_stat(self, *args, **kwargs)

    monkeypatch.setattr(Path, "stat", stat)
