"""Boundary layer: parsing external payloads and serializing results."""
