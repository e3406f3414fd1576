"""Shared helpers for paths and schema validation."""
