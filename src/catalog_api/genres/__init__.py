"""Genre endpoints."""
