"""Utility helpers for export files and directory management."""

from .io import ensure_dirs, outputs_dir, write_export

__all__ = ["ensure_dirs", "outputs_dir", "write_export"]
