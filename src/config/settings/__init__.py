"""Agregador de settings do saga-relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# GitHub settings
from config.settings.github import (
    DEFAULT_EVENT_PREFIX,
    GITHUB_API_BASE_URL,
    GITHUB_API_VERSION,
    GitHubSettings,
    get_github_settings,
)

# Infrastructure settings
from config.settings.infra import (
    CloudTasksSettings,
    get_cloud_tasks_settings,
)

# Relay settings
from config.settings.relay import (
    BodyEncoding,
    ProcessingMode,
    RelaySettings,
    get_relay_settings,
)

# Slack settings
from config.settings.slack import (
    DEFAULT_TIMESTAMP_TOLERANCE_SECONDS,
    SlackSettings,
    get_slack_settings,
)

__all__ = [
    # Constants
    "DEFAULT_EVENT_PREFIX",
    "DEFAULT_TIMESTAMP_TOLERANCE_SECONDS",
    "GITHUB_API_BASE_URL",
    "GITHUB_API_VERSION",
    # Base
    "BaseSettings",
    "BodyEncoding",
    # Infrastructure
    "CloudTasksSettings",
    "Environment",
    # GitHub
    "GitHubSettings",
    "ProcessingMode",
    # Relay
    "RelaySettings",
    # Slack
    "SlackSettings",
    "get_base_settings",
    "get_cloud_tasks_settings",
    "get_github_settings",
    "get_relay_settings",
    "get_slack_settings",
]
