"""File name sanitization functionality."""

import re
import unicodedata
from typing import ClassVar, final

from tagtidy.config.settings import MAX_NAME_BYTES


@final
class Sanitizer:
    """Make strings legal as a single path component on common filesystems."""

    # Characters no mainstream filesystem accepts in a name
    ILLEGAL_CHARACTERS: ClassVar[re.Pattern[str]] = re.compile(r'[/?<>\\:*|"]')

    # C0 and C1 control characters
    CONTROL_CHARACTERS: ClassVar[re.Pattern[str]] = re.compile(r"[\x00-\x1f\x80-\x9f]")

    # Windows device names, bare or with an extension
    WINDOWS_RESERVED: ClassVar[re.Pattern[str]] = re.compile(
        r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE
    )

    @classmethod
    def _truncate_bytes(cls, text: str, max_bytes: int) -> str:
        """Cut ``text`` to at most ``max_bytes`` UTF-8 bytes on a character boundary."""
        encoded = text.encode("utf-8")
        if len(encoded) <= max_bytes:
            return text
        return encoded[:max_bytes].decode("utf-8", errors="ignore")

    @classmethod
    def sanitize_filename(cls, text: str | None, max_bytes: int = MAX_NAME_BYTES) -> str:
        """Sanitize a file name by applying the following rules:
        1. Remove characters illegal in file names and control characters
        2. Normalize using NFC
        3. Truncate to max_bytes UTF-8 bytes
        4. Strip leading whitespace and trailing dots/whitespace (so "." and ".." vanish)
        5. Blank out Windows reserved device names

        Args:
            text: Name to sanitize.
            max_bytes: Maximum length in UTF-8 bytes.

        Returns:
            str: Sanitized name, or an empty string when nothing usable is left.
            Applying the function to its own output returns it unchanged.
        """
        if not text:
            return ""

        text = cls.ILLEGAL_CHARACTERS.sub("", str(text))
        text = cls.CONTROL_CHARACTERS.sub("", text)
        # Normalize after removal: it can bring a base letter next to a combining mark.
        text = unicodedata.normalize("NFC", text)
        text = cls._truncate_bytes(text, max_bytes)
        text = text.lstrip().rstrip(". \t\n\r\f\v")

        if cls.WINDOWS_RESERVED.match(text):
            return ""
        return text


__all__ = ["Sanitizer"]
