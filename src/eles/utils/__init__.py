"""Shared helpers for eles."""
