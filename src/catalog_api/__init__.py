"""Multi-tenant genre and artist catalog API (Lambda handlers and HTTP app)."""
