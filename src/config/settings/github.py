"""Settings do GitHub (repository_dispatch)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

GITHUB_API_BASE_URL: str = "https://api.github.com"
GITHUB_API_VERSION: str = "2022-11-28"
DEFAULT_EVENT_PREFIX: str = "saga-"


@dataclass(frozen=True)
class GitHubSettings:
    """Coordenadas e credencial do repositório alvo.

    Attributes:
        token: Token bearer com permissão de escrita no repositório
        owner: Dono (usuário ou organização)
        repo: Nome do repositório
        api_base_url: URL base da API (GitHub Enterprise pode sobrescrever)
        event_prefix: Prefixo concatenado ao primeiro argumento do comando
    """

    token: str = ""
    owner: str = ""
    repo: str = ""
    api_base_url: str = GITHUB_API_BASE_URL
    event_prefix: str = DEFAULT_EVENT_PREFIX

    @property
    def dispatches_endpoint(self) -> str:
        """URL da operação "create repository dispatch event"."""
        base = self.api_base_url.rstrip("/")
        return f"{base}/repos/{self.owner}/{self.repo}/dispatches"

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.token:
            errors.append("GITHUB_TOKEN não configurado")
        if not self.owner:
            errors.append("GITHUB_OWNER não configurado")
        if not self.repo:
            errors.append("GITHUB_REPO não configurado")

        return errors


def _load_from_env() -> GitHubSettings:
    """Carrega GitHubSettings a partir de variáveis de ambiente."""
    return GitHubSettings(
        token=os.getenv("GITHUB_TOKEN", ""),
        owner=os.getenv("GITHUB_OWNER", ""),
        repo=os.getenv("GITHUB_REPO", ""),
        api_base_url=os.getenv("GITHUB_API_URL", GITHUB_API_BASE_URL),
        event_prefix=os.getenv("GITHUB_EVENT_PREFIX", DEFAULT_EVENT_PREFIX),
    )


@lru_cache(maxsize=1)
def get_github_settings() -> GitHubSettings:
    """Retorna instância cacheada de GitHubSettings."""
    return _load_from_env()
