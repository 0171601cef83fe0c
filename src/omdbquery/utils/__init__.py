"""Utility helpers for omdbquery."""
