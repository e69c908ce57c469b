"""NYC rat sightings: cleaning, summaries, exports and charts."""

__version__ = "0.1.0"
