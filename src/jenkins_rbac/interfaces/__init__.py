"""Caller-facing interfaces - HTTP API and CLI."""
