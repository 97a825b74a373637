"""API: camada de borda.

Responsabilidades:
- Receber o slash command e o callback do worker
- Validar assinaturas e payloads
- Falar com APIs externas (Slack response_url, GitHub)

Subpastas:
- connectors/: adapters HTTP por serviço externo
- routes/: endpoints HTTP

NÃO PODE conter: orquestração do use case (fica em app/).
"""
