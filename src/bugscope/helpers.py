from typing import Any, Optional

REDACTED = "***"


def to_text(v: Any) -> str:
    """Best-effort stringify; ``None`` becomes the empty string."""
    if v is None:
        return ""
    try:
        return str(v)
    except Exception:
        return ""


def redact(text: Any, secret: Optional[str]) -> str:
    """Replace every occurrence of ``secret`` in ``text``.

    Provider SDKs sometimes echo the API key back inside error messages
    ("Incorrect API key provided: sk-..."), so anything user-facing that was
    built from an exception goes through here first.
    """
    s = to_text(text)
    if not secret or not secret.strip():
        return s
    return s.replace(secret, REDACTED)


def is_blank(v: Any) -> bool:
    return not to_text(v).strip()
