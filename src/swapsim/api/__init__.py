"""HTTP application and routes."""
