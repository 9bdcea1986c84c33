"""Shared utilities (serialization, exit codes)."""
