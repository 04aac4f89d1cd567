"""Parse Gmail API message payloads into flat records."""

from __future__ import annotations

import base64
import binascii

from workspace_bridge.config import DetailLevel
from workspace_bridge.mail.models import NO_SUBJECT, UNKNOWN_SENDER, NormalizedEmail


def normalize_message(message: dict, detail_level: DetailLevel = DetailLevel.FULL) -> NormalizedEmail:
    """Extract the flat record from a Gmail API message resource.

    Pure function, no network calls. The body is only decoded for
    ``format=full`` messages; metadata fetches carry no part tree.
    """
    payload = message.get("payload") or {}
    headers = extract_headers(payload)

    body = decode_body(payload) if detail_level == DetailLevel.FULL else ""

    return NormalizedEmail(
        id=message["id"],
        subject=headers.get("subject") or NO_SUBJECT,
        sender=headers.get("from") or UNKNOWN_SENDER,
        snippet=message.get("snippet"),
        body=body,
    )


def extract_headers(payload: dict) -> dict[str, str]:
    """Map lower-cased header names to values. The last repeated header wins."""
    return {
        h["name"].lower(): h.get("value", "")
        for h in payload.get("headers") or []
        if h.get("name")
    }


def decode_body(payload: dict) -> str:
    """Return the plain-text body of a message payload.

    A leaf node yields its own data. A multipart node yields the first
    direct ``text/plain`` child carrying data; nested multiparts are not
    searched.
    """
    parts = payload.get("parts")
    if parts is None:
        return _decode_body_data(payload)

    for part in parts:
        if part.get("mimeType") == "text/plain" and _body_data(part):
            return _decode_body_data(part)
    return ""


def _body_data(node: dict) -> str:
    return (node.get("body") or {}).get("data") or ""


def _decode_body_data(node: dict) -> str:
    data = _body_data(node)
    if not data:
        return ""
    # Gmail sends unpadded base64url; standard-alphabet input is accepted too.
    padded = data + "=" * (-len(data) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError):
        return ""
    return raw.decode("utf-8", errors="replace")
