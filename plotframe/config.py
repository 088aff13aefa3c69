"""Plot configuration: a flat map of dotted names read from an rc-style text."""

from __future__ import annotations

from typing import Callable, Mapping, TypeVar

T = TypeVar("T")


class ConfigError(ValueError):
    """Raised for malformed configuration text or values."""


class _Scanner:
    """Character cursor over configuration text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def peek(self) -> str | None:
        return self._text[self._pos] if self._pos < len(self._text) else None

    def advance(self) -> str | None:
        ch = self.peek()
        if ch is not None:
            self._pos += 1
        return ch


def _skip_comment(sc: _Scanner) -> None:
    while (ch := sc.advance()) is not None:
        if ch in "\n\r":
            return


def _skip_whitespace(sc: _Scanner) -> str | None:
    while (ch := sc.advance()) is not None:
        if not ch.isspace():
            return ch
    return None


def _skip_space(sc: _Scanner) -> str | None:
    while (ch := sc.advance()) is not None:
        if ch not in " \t":
            return ch
    return None


def _read_identifier(first: str, sc: _Scanner) -> str | None:
    if first == "#":
        _skip_comment(sc)
        return None
    if not first.isalpha():
        raise ConfigError(f"unexpected character {first!r}")

    chars = [first]
    while (ch := sc.peek()) is not None:
        if ch.isspace() or ch in "#:":
            break
        chars.append(ch)
        sc.advance()
    return "".join(chars)


def _read_string_value(sc: _Scanner) -> str:
    chars = []
    while (ch := sc.advance()) is not None:
        if ch in "\r\n":
            raise ConfigError("unexpected end of line in quoted value")
        if ch == '"':
            break
        chars.append(ch)
    return "".join(chars)


def _read_value(sc: _Scanner) -> str:
    first = _skip_space(sc)
    if first is None:
        return ""
    if first == '"':
        return _read_string_value(sc)

    chars = [first]
    while (ch := sc.advance()) is not None:
        if ch in "\r\n":
            break
        if ch == "#":
            _skip_comment(sc)
            break
        chars.append(ch)
    return "".join(chars)


def _read_line(config: "Config", sc: _Scanner) -> bool:
    first = _skip_whitespace(sc)
    if first is None:
        return False

    name = _read_identifier(first, sc)
    if name is None:
        return True

    if sc.advance() != ":":
        raise ConfigError(f"expected ':' after {name!r}")

    config.add_value(name, _read_value(sc))
    return True


class Config:
    """Settings keyed by dotted names, looked up with suffix fallback."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    @classmethod
    def parse(cls, text: str) -> "Config":
        """Read ``name: value`` lines; ``#`` starts a comment, values may be quoted."""
        config = cls()
        sc = _Scanner(text)
        while _read_line(config, sc):
            pass
        return config

    def add_value(self, name: str, value: str) -> None:
        self._values[name] = value.strip()

    def get(self, name: str) -> str | None:
        """Look up ``name``, then each shorter suffix of its dotted parts."""
        if name in self._values:
            return self._values[name]

        parts = name.split(".")
        while parts:
            parts.pop(0)
            value = self._values.get(".".join(parts))
            if value is not None:
                return value
        return None

    def get_with_prefix(self, prefix: str, name: str) -> str | None:
        return self.get(self.join(prefix, name))

    def get_as_type(
        self, prefix: str, name: str, kind: Callable[[str], T] = str
    ) -> T | None:
        """Look up a value and convert it with ``kind``; ``None`` when absent."""
        value = self.get_with_prefix(prefix, name)
        if value is None:
            return None
        try:
            return kind(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(
                f"cannot convert {self.join(prefix, name)}={value!r}"
            ) from exc

    def join(self, prefix: str, suffix: str) -> str:
        return f"{prefix}.{suffix}"