"""Ad hoc comparisons over the cleaned sightings table."""

from .compare import analyze_year, compare_boroughs

__all__ = ["analyze_year", "compare_boroughs"]
