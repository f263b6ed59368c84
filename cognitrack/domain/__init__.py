"""Pure, synchronous scoring and analytics core."""
