from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml


DEFAULT_CONFIG_PATH = Path("config.yaml")
DEFAULT_DATA_FILE = Path("data/Rat_Sightings.csv")
DEFAULT_OUTPUT_DIR = Path("output")
CLEAN_FILENAME = "Rat_Sightings_clean.csv"
DEFAULT_CLEAN_FILE = DEFAULT_DATA_FILE.parent / CLEAN_FILENAME


def load_config(path: str | os.PathLike | None = None) -> Dict[str, Any]:
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    with open(cfg_path, "r") as f:
        return yaml.safe_load(f)


def resolve_paths(cfg: Dict[str, Any]) -> Tuple[Path, Path]:
    """Return ``(data_file, output_dir)`` from a loaded config, falling back to defaults."""
    paths = cfg.get("paths", {}) or {}
    data_cfg = cfg.get("data", {}) or {}
    raw_dir = Path(paths.get("raw", DEFAULT_DATA_FILE.parent))
    data_file = raw_dir / data_cfg.get("file", DEFAULT_DATA_FILE.name)
    output_dir = Path(paths.get("outputs", DEFAULT_OUTPUT_DIR))
    return data_file, output_dir


__all__ = [
    "load_config",
    "resolve_paths",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_DATA_FILE",
    "DEFAULT_OUTPUT_DIR",
    "CLEAN_FILENAME",
    "DEFAULT_CLEAN_FILE",
]
