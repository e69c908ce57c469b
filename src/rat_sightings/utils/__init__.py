"""IO helpers: directory management, CSV exports and reloads."""

from .io import ensure_dirs, export_clean_data, export_summaries, load_clean_dataset

__all__ = ["ensure_dirs", "export_clean_data", "export_summaries", "load_clean_dataset"]
