"""Rotas internas do worker."""
