"""
URL-safe Base64 text codec for Claim Tokens.

Tokens travel in URL path segments and query strings, so the codec uses the
RFC 4648 URL-safe alphabet (``-`` and ``_`` instead of ``+`` and ``/``) and
omits ``=`` padding on output. Padding is restored transparently on input.
"""

import base64
import re

_BASE64URL_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def is_base64url(text: str) -> bool:
    """Return True if ``text`` is non-empty URL-safe Base64 (padding optional)."""
    return isinstance(text, str) and bool(text) and _BASE64URL_RE.fullmatch(text) is not None


def base64url_encode(text: str) -> str:
    """Encode text (as UTF-8) into an unpadded URL-safe Base64 string."""
    encoded = base64.urlsafe_b64encode(text.encode("utf-8"))
    return encoded.decode("ascii").rstrip("=")


def base64url_decode(text: str) -> str:
    """
    Decode a URL-safe Base64 string back into text.

    Any string over the URL-safe alphabet is accepted. A dangling final
    character that cannot complete a byte is ignored, and bytes that are not
    valid UTF-8 come back as U+FFFD so that later validation can reject them.

    Args:
        text: URL-safe Base64, with or without ``=`` padding.

    Returns:
        The decoded text.

    Raises:
        ValueError: If ``text`` contains characters outside the alphabet.
    """
    if _BASE64URL_RE.fullmatch(text) is None:
        raise ValueError("Input is not URL-safe Base64")

    data = text.rstrip("=")
    if len(data) % 4 == 1:
        data = data[:-1]
    data += "=" * (-len(data) % 4)

    return base64.urlsafe_b64decode(data).decode("utf-8", errors="replace")
