#!/usr/bin/env python3
"""Envia um slash command assinado para um relay em execução (smoke test).

Uso:
    SLACK_SIGNING_SECRET=... python scripts/send_test_command.py \
        --url https://relay.example.com/ --text "deploy staging" \
        --response-url https://hooks.slack.com/commands/T000/123/abc

Padrão: body em base64 (use --encoding identity para Slack direto).
"""

from __future__ import annotations

import argparse
import os
import sys
import time

import httpx

from api.connectors.slack import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    compute_slack_signature,
    encode_command_body,
)


def build_request(
    *,
    text: str,
    response_url: str,
    secret: str,
    command: str = "/saga",
    user_name: str = "smoke-test",
    encoding: str = "base64",
    timestamp: int | None = None,
) -> tuple[bytes, dict[str, str]]:
    body = encode_command_body(
        {
            "command": command,
            "text": text,
            "user_name": user_name,
            "response_url": response_url,
        },
        encoding,  # type: ignore[arg-type]
    )
    ts = str(timestamp if timestamp is not None else int(time.time()))
    headers = {
        TIMESTAMP_HEADER: ts,
        SIGNATURE_HEADER: compute_slack_signature(body, ts, secret),
        "Content-Type": "application/x-www-form-urlencoded",
    }
    return body, headers


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--url", required=True, help="Endpoint público do relay")
    parser.add_argument("--text", required=True, help='Texto do comando (ex: "tag v1.2.3")')
    parser.add_argument("--response-url", required=True, help="URL de follow-up")
    parser.add_argument("--command", default="/saga")
    parser.add_argument("--user-name", default="smoke-test")
    parser.add_argument("--encoding", choices=("base64", "identity"), default="base64")
    args = parser.parse_args(argv)

    secret = os.getenv("SLACK_SIGNING_SECRET", "")
    if not secret:
        print("SLACK_SIGNING_SECRET não definido", file=sys.stderr)
        return 2

    body, headers = build_request(
        text=args.text,
        response_url=args.response_url,
        secret=secret,
        command=args.command,
        user_name=args.user_name,
        encoding=args.encoding,
    )
    response = httpx.post(args.url, content=body, headers=headers)
    print(f"{response.status_code} {response.text}")
    return 0 if response.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
