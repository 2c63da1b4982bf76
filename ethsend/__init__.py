"""Send a single raw network message and print the response."""
