"""Implementações concretas de IO (handoff de background)."""
