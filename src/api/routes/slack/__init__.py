"""Rotas do Slack (slash command)."""
