"""A small parser for the brace-delimited scene description format.

A file holds named sections, each a block of ``name = value;`` assignments::

    Scene
    {
        Version.Major = 1;
        Camera.Position = 0.0, 1.0, -5.0;   // comments run to end of line
    }

All whitespace is discarded before parsing, so names and values never
contain spaces.  Values are looked up by name inside the current section.
"""

from __future__ import annotations

import enum
import os
import re

from .colour import Colour
from .vectors import Vec3

_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_RE = re.compile(r"[+-]?\d+")
_BLANKS = frozenset(" \t\n\r")


class ConfigError(ValueError):
    """Raised when a config file cannot be read or parsed, or a section is missing."""


class _State(enum.Enum):
    NAME = enum.auto()
    SECTION = enum.auto()
    VARIABLE = enum.auto()
    VALUE = enum.auto()


def _preprocess(text: str) -> str:
    """Drop ``//`` comments and all whitespace."""
    return "".join(
        ch
        for line in text.split("\n")
        for ch in line.split("//", 1)[0]
        if ch not in _BLANKS
    )


def _parse(text: str) -> tuple[dict[str, str], set[str]]:
    chars = _preprocess(text)
    variables: dict[str, str] = {}
    sections: set[str] = set()
    state = _State.NAME
    index = 0
    depth = 0
    name = ""
    value = ""
    section = ""

    while True:
        at_end = index == len(chars)
        if state is _State.NAME:
            if at_end:
                return variables, sections
            ch = chars[index]
            if ch == "{":
                if name in sections:
                    raise ConfigError(f"duplicate section {name!r}")
                sections.add(name)
                section = name
                name = ""
                state = _State.SECTION
                continue
            name += ch
            index += 1

        elif state is _State.SECTION:
            if at_end:
                raise ConfigError("unexpected end of input inside a section")
            ch = chars[index]
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    index += 1
                    section = ""
                    state = _State.NAME
                    continue
            else:
                state = _State.VARIABLE
                continue
            index += 1

        elif state is _State.VARIABLE:
            if at_end:
                raise ConfigError("unexpected end of input in a variable name")
            ch = chars[index]
            if ch == "{":
                # Not a variable after all, but the start of a nested block.
                state = _State.SECTION
                continue
            if ch == "}":
                raise ConfigError(f"unexpected '}}' after {name!r}")
            if ch == "=":
                if not name:
                    raise ConfigError("assignment without a variable name")
                index += 1
                state = _State.VALUE
                continue
            name += ch
            index += 1

        else:
            if at_end:
                raise ConfigError(f"unexpected end of input in the value of {name!r}")
            ch = chars[index]
            if ch in "{}":
                raise ConfigError(f"unexpected {ch!r} in the value of {name!r}")
            if ch == ";":
                if not value:
                    raise ConfigError(f"variable {name!r} has no value")
                # The first assignment of a name wins.
                variables.setdefault(f"{section}/{name}", value)
                name = ""
                value = ""
                index += 1
                state = _State.SECTION
                continue
            value += ch
            index += 1


def _scan_floats(text: str, count: int) -> list[float]:
    """Read up to ``count`` comma-separated numbers from the start of ``text``."""
    values: list[float] = []
    pos = 0
    for n in range(count):
        if n:
            if not text.startswith(",", pos):
                break
            pos += 1
        match = _FLOAT_RE.match(text, pos)
        if match is None:
            break
        values.append(float(match.group()))
        pos = match.end()
    return values


def _leading_float(text: str) -> float:
    match = _FLOAT_RE.match(text.lstrip())
    return float(match.group()) if match else 0.0


def _leading_int(text: str) -> int:
    match = _INT_RE.match(text.lstrip())
    return int(match.group()) if match else 0


class Config:
    """Sections of named values read from a scene description."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        try:
            with open(path, encoding="latin-1", newline="") as handle:
                text = handle.read()
        except OSError as exc:
            raise ConfigError(f"cannot read {os.fspath(path)!r}: {exc}") from exc
        self._load(text)

    @classmethod
    def from_text(cls, text: str) -> Config:
        """Parse a config held in a string."""
        config = cls.__new__(cls)
        config._load(text)
        return config

    def _load(self, text: str) -> None:
        self._variables, self._sections = _parse(text)
        self._section: str | None = None

    def set_section(self, name: str) -> None:
        """Make ``name`` the section that lookups read from.

        Raises ConfigError if there is no such section; lookups then return
        their defaults until another section is chosen.
        """
        if name not in self._sections:
            self._section = None
            raise ConfigError(f"no section named {name!r}")
        self._section = name

    def _lookup(self, name: str) -> str | None:
        if self._section is None:
            return None
        return self._variables.get(f"{self._section}/{name}")

    def get_bool(self, name: str, default: bool) -> bool:
        """True only when the value is exactly ``true``."""
        value = self._lookup(name)
        return default if value is None else value == "true"

    def get_float(self, name: str, default: float) -> float:
        """The leading number of the value, or 0.0 if it has none."""
        value = self._lookup(name)
        return default if value is None else _leading_float(value)

    def get_int(self, name: str, default: int) -> int:
        """The leading integer of the value, or 0 if it has none."""
        value = self._lookup(name)
        return default if value is None else _leading_int(value)

    def get_string(self, name: str, default: str) -> str:
        value = self._lookup(name)
        return default if value is None else value

    def get_vector(self, name: str, default: Vec3) -> Vec3:
        """A value of three comma-separated numbers; default if it has fewer."""
        value = self._lookup(name)
        if value is None:
            return default
        numbers = _scan_floats(value, 3)
        return Vec3(*numbers) if len(numbers) == 3 else default

    def get_triangle(
        self, name: str, default: tuple[Vec3, Vec3, Vec3]
    ) -> tuple[Vec3, Vec3, Vec3]:
        """A value of nine comma-separated numbers as three corner points."""
        value = self._lookup(name)
        if value is None:
            return default
        numbers = _scan_floats(value, 9)
        if len(numbers) != 9:
            return default
        return (Vec3(*numbers[0:3]), Vec3(*numbers[3:6]), Vec3(*numbers[6:9]))

    def get_float_or_colour(self, name: str) -> Colour:
        """A colour given either as one grey level or as three channels."""
        scalar = self.get_float(name, 0.0)
        vector = self.get_vector(name, Vec3(scalar, scalar, scalar))
        return Colour(vector.x, vector.y, vector.z)