"""Lambda handlers for the assistant HTTP API."""
