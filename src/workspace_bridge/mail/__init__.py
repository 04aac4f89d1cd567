"""Mail decoding and gated access."""

from workspace_bridge.mail.models import NormalizedEmail
from workspace_bridge.mail.parser import decode_body, extract_headers, normalize_message
from workspace_bridge.mail.service import MailService

__all__ = [
    "MailService",
    "NormalizedEmail",
    "decode_body",
    "extract_headers",
    "normalize_message",
]
