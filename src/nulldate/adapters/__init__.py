"""Integrations with storage and serialization libraries."""
