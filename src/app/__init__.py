"""App: orquestração do relay.

Subpastas:
- bootstrap/: composition root (config, factories, inicialização)
- domain/: modelos do comando, dispatch e notificação (sem IO)
- use_cases/: dispatch + notificação de um RelayJob
- infra/: estratégias concretas de handoff
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config carrega; utils apoia.
"""
