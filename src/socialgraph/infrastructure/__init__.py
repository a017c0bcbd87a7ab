"""Shared infrastructure: settings, logging and observation context."""
