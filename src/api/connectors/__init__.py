"""Connectors: adapters de borda para APIs externas.

Estrutura:
- slack/: assinatura, decodificação do slash command e follow-ups
- github/: repository_dispatch

http_base.py concentra o POST JSON compartilhado (httpx, sem retry).
"""

__all__: list[str] = []
