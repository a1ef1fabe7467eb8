"""Adapters turning license URLs into domain objects."""
