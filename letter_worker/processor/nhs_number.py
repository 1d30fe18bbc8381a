import re

# 3-3-4 digits, each separator a single optional whitespace character.
# Boundaries are ASCII word characters only; accented letters may touch the digits.
NHS_NUMBER_PATTERN = re.compile(
    r"(?<![0-9A-Za-z_])[0-9]{3}\s?[0-9]{3}\s?[0-9]{4}(?![0-9A-Za-z_])"
)
_WHITESPACE = re.compile(r"\s")


def extract_nhs_number(text: str) -> str | None:
    """Return the first NHS number in text with separators removed, or None.

    The digits are returned as found; no checksum validation is applied.
    """
    match = NHS_NUMBER_PATTERN.search(text)
    if match is None:
        return None
    return _WHITESPACE.sub("", match.group(0))
