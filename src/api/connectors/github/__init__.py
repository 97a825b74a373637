"""Connector GitHub (repository_dispatch)."""

from api.connectors.github.dispatch_client import GitHubDispatchClient

__all__ = ["GitHubDispatchClient"]
