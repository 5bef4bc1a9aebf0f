"""Shared helpers: span utilities, typed errors and logging setup."""
