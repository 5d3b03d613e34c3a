"""Shared helpers and type definitions."""
