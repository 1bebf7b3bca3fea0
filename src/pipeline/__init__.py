"""Document routing and processing."""
