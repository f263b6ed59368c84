"""Cross-cutting concerns: configuration, logging and the exception base."""
