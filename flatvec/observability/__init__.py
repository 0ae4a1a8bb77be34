"""Observability: structured logging with structlog."""
