"""Lenient payload decoding for parser node fields"""


def to_text(value) -> str:
    """Return value as str; bytes are decoded as UTF-8 with invalid sequences replaced."""
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)
