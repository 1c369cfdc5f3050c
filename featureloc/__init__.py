"""Feature location for software product lines."""
