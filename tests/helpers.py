"""Builders for Gmail API message resources used across tests."""

import base64


def encode(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii")


def make_message(msg_id, subject=None, sender=None, body="", snippet=None):
    headers = []
    if subject is not None:
        headers.append({"name": "Subject", "value": subject})
    if sender is not None:
        headers.append({"name": "From", "value": sender})
    return {
        "id": msg_id,
        "snippet": snippet if snippet is not None else body[:20],
        "payload": {
            "mimeType": "text/plain",
            "headers": headers,
            "body": {"data": encode(body)} if body else {"size": 0},
        },
    }
