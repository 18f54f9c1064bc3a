"""Content directory services."""
