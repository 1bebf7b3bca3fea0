"""Directory runs with bounded concurrency."""
