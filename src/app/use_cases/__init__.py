"""Casos de uso do relay."""
