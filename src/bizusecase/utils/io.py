from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from ..engine.generator import UseCaseGenerator


def ensure_dirs(*dirs: Path) -> None:
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)


def outputs_dir(paths_cfg: Optional[Dict[str, str]]) -> Path:
    return Path((paths_cfg or {}).get("outputs", "outputs"))


def write_export(
    generator: UseCaseGenerator,
    out_dir: Path,
    fmt: str = "json",
    stem: Optional[str] = None,
) -> Path:
    """Write ``generator.export(fmt)`` under ``out_dir`` and return the file path."""
    payload = generator.export(fmt)
    ensure_dirs(out_dir)
    if stem is None:
        stem = "use_cases_" + datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    path = out_dir / f"{stem}.{fmt}"
    path.write_text(payload, encoding="utf-8")
    return path


__all__ = ["ensure_dirs", "outputs_dir", "write_export"]
