"""Artist endpoints."""
