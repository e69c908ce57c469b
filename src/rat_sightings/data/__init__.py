"""Data loading, cleaning and summary utilities."""

from .preprocess import load_and_clean_rat_data, load_raw_data, clean_rat_data
from .scan import summarize_data

__all__ = ["load_and_clean_rat_data", "load_raw_data", "clean_rat_data", "summarize_data"]
