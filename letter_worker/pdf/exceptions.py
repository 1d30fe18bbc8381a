class DecodeError(Exception):
    """Raised when document bytes cannot be parsed as a PDF."""

    reason = "decode_failed"
