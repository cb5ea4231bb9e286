"""Service-level routes."""
