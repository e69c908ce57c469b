"""Chart rendering for the cleaned sightings table."""

from .plots import (
    generate_all_plots,
    plot_seasonal_distribution,
    plot_sightings_by_borough,
    plot_sightings_by_location,
)

__all__ = [
    "generate_all_plots",
    "plot_sightings_by_borough",
    "plot_sightings_by_location",
    "plot_seasonal_distribution",
]
