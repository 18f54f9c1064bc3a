"""Creator profile site backend: content directory service and HTTP API."""

__version__ = "1.0.0"
