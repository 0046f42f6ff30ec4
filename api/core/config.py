from __future__ import annotations

import os
from typing import Any, Dict, List, Optional


def get_config_path() -> str:
    return os.getenv("BIZUSECASE_CONFIG", "config.yaml")


def get_cors_origins(cfg: Optional[Dict[str, Any]] = None) -> List[str]:
    origins_env = os.getenv("CORS_ORIGINS", "")
    if origins_env:
        return [o.strip() for o in origins_env.split(",") if o.strip()]
    configured = ((cfg or {}).get("api") or {}).get("cors_origins")
    if configured:
        return [str(o) for o in configured]
    return [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]


def get_log_level(cfg: Dict[str, Any]) -> str:
    return str((cfg.get("logging") or {}).get("level", "INFO")).upper()
