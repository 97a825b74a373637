"""Constantes compartilhadas entre o handoff queued e o worker."""

WORKER_TOKEN_HEADER = "X-Relay-Worker-Token"
