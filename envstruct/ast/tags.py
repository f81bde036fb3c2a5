"""
Go Struct Tag Parsing

Parses struct tag strings such as `env:"HOST" json:"host,omitempty"` the
way Go's reflect.StructTag does: space-separated key:"value" pairs where
each value uses Go double-quoted string syntax. Parsing stops silently at
the first malformed pair.
"""

import re
from typing import Iterator, Optional

from envstruct.configs.constants import ENV_TAG_KEY, RAW_TAG_QUOTE

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}

_ESCAPE_RE = re.compile(
    r"\\(?:(?P<simple>[abfnrtv\\\"])"
    r"|x(?P<hex>[0-9A-Fa-f]{2})"
    r"|(?P<octal>[0-7]{3})"
    r"|u(?P<u16>[0-9A-Fa-f]{4})"
    r"|U(?P<u32>[0-9A-Fa-f]{8})"
    r"|(?P<bad>.?))",
    re.DOTALL,
)


def unquote(quoted: str) -> Optional[str]:
    """
    Decode a Go double-quoted string literal.

    Escapes are decoded to bytes as Go does (`\\xNN` and octal are raw bytes,
    `\\u` escapes are UTF-8 encoded), then read back as UTF-8. Bytes that do
    not form valid UTF-8 are kept as surrogate escapes, so `"\\xff"` round-trips
    to byte 0xFF through `value.encode("utf-8", "surrogateescape")`.

    Returns None if the literal is malformed.
    """
    if len(quoted) < 2 or quoted[0] != '"' or quoted[-1] != '"':
        return None
    body = quoted[1:-1]
    if "\n" in body:
        return None

    parts: list[bytes] = []
    pos = 0
    for match in _ESCAPE_RE.finditer(body):
        literal = body[pos:match.start()]
        if '"' in literal:
            return None
        parts.append(literal.encode("utf-8"))
        pos = match.end()

        if match.group("simple") is not None:
            parts.append(_SIMPLE_ESCAPES[match.group("simple")].encode("utf-8"))
        elif match.group("hex") is not None:
            parts.append(bytes([int(match.group("hex"), 16)]))
        elif match.group("octal") is not None:
            value = int(match.group("octal"), 8)
            if value > 0xFF:
                return None
            parts.append(bytes([value]))
        elif match.group("u16") is not None or match.group("u32") is not None:
            code = int(match.group("u16") or match.group("u32"), 16)
            if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                return None
            parts.append(chr(code).encode("utf-8"))
        else:
            return None

    tail = body[pos:]
    if '"' in tail:
        return None
    parts.append(tail.encode("utf-8"))
    return b"".join(parts).decode("utf-8", errors="surrogateescape")


def _is_key_char(ch: str) -> bool:
    return ch > " " and ch not in (":", '"', "\x7f")


class StructTag:
    """A Go struct tag string with reflect.StructTag lookup semantics."""

    def __init__(self, tag: str = ""):
        self.tag = tag

    @classmethod
    def from_literal(cls, literal: Optional[str]) -> "StructTag":
        """Build from the tag literal as written in source, backticks included."""
        if not literal:
            return cls("")
        return cls(literal.strip(RAW_TAG_QUOTE))

    def _pairs(self) -> Iterator[tuple[str, str]]:
        """Yield (key, quoted value) pairs until the tag ends or is malformed."""
        tag = self.tag
        while tag:
            tag = tag.lstrip(" ")
            if not tag:
                return

            i = 0
            while i < len(tag) and _is_key_char(tag[i]):
                i += 1
            if i == 0 or i + 1 >= len(tag) or tag[i] != ":" or tag[i + 1] != '"':
                return
            key = tag[:i]
            tag = tag[i + 1:]

            # Scan the quoted value, skipping escaped characters
            i = 1
            while i < len(tag) and tag[i] != '"':
                if tag[i] == "\\":
                    i += 1
                i += 1
            if i >= len(tag):
                return
            yield key, tag[:i + 1]
            tag = tag[i + 1:]

    def lookup(self, key: str) -> tuple[str, bool]:
        """
        Look up the value for a key.

        Returns:
            (value, True) if the key is present, ("", False) otherwise
        """
        for name, quoted in self._pairs():
            if name == key:
                value = unquote(quoted)
                if value is None:
                    break
                return value, True
        return "", False

    def get(self, key: str) -> str:
        """Value for a key, or empty string."""
        return self.lookup(key)[0]

    def keys(self) -> list[str]:
        """Keys in the order they appear."""
        return [name for name, _ in self._pairs()]

    def __repr__(self) -> str:
        return f"StructTag({self.tag!r})"


def go_upper(text: str) -> str:
    """
    Upper-case one character at a time, like Go's strings.ToUpper.

    Characters whose upper case is more than one character (`ß`, `ŉ`) are left
    unchanged instead of expanding.
    """
    return "".join(ch.upper() if len(ch.upper()) == 1 else ch for ch in text)


def env_tag(tag: StructTag, fallback: str) -> str:
    """
    Environment variable key for a field.

    Uses the `env` tag value verbatim when present, otherwise the upper-cased
    fallback (field name, or rendered type for embedded fields).
    """
    value, ok = tag.lookup(ENV_TAG_KEY)
    if not ok:
        return go_upper(fallback)
    return value
