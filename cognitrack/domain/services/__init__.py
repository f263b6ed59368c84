"""Domain services: scoring, trend, correlation and aggregation."""
