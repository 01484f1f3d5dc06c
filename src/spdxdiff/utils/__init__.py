"""Utility helpers for the spdxdiff package."""
