"""Endpoint modules for the vehicle position feed."""
