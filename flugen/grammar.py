"""Line grammar for annotated Dart sources.

Each raw line is classified into exactly one token:

  Marker            // @flu
  OptionComment       // @flu key="id" enum
  ClassHeader       abstract class _User {
  ConstConstructor    const _User();
  FieldDecl           String get name;
  Blank             (empty once the trailing comment is removed)
  Code              anything else

Tokens are context free. Whether a ClassHeader or FieldDecl is honoured
depends on the parser state, so every token keeps its comment-stripped
text for brace counting.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from .models import FieldOptions

MARKER = "// @flu"

_CLASS_HEADER_RE = re.compile(r"^abstract class _(\w+) \{")
_CONST_CONSTRUCTOR_RE = re.compile(r"^  const _(\w+)\(\);$")
_FIELD_RE = re.compile(r"^\s\s([A-Za-z_].*) get (\w+);$")
_OPTION_COMMENT_RE = re.compile(r"^  // @flu:? (.*)$")
_OPTION_ITEM_RE = re.compile(r'(?P<key>\w+)(?:=(?P<value>"[^"]+"|\S+))?')

# Recognized option keys
_KEY_OPTION = "key"
_ENUM_OPTION = "enum"


@dataclass(frozen=True)
class Token:
    raw: str
    text: str


@dataclass(frozen=True)
class Marker(Token):
    pass


@dataclass(frozen=True)
class Blank(Token):
    pass


@dataclass(frozen=True)
class OptionComment(Token):
    payload: str


@dataclass(frozen=True)
class ClassHeader(Token):
    name: str

    @property
    def closed(self) -> bool:
        """True for a single-line declaration such as `abstract class _A {}`."""
        return brace_delta(self.text) <= 0


@dataclass(frozen=True)
class ConstConstructor(Token):
    name: str


@dataclass(frozen=True)
class FieldDecl(Token):
    type_text: str
    name: str


@dataclass(frozen=True)
class Code(Token):
    pass


def strip_comment(line: str) -> str:
    """Remove a trailing `//` comment and trailing whitespace."""
    return line.split("//", 1)[0].rstrip()


def brace_delta(text: str) -> int:
    """Net number of scopes opened on a line."""
    return text.count("{") - text.count("}")


def match_marker(line: str) -> bool:
    return line == MARKER


def match_option_comment(line: str) -> str | None:
    """Return the option payload of a field option comment line."""
    m = _OPTION_COMMENT_RE.match(line)
    return m.group(1) if m else None


def match_class_header(text: str) -> str | None:
    """Return the base name (without underscore) of a class header."""
    m = _CLASS_HEADER_RE.match(text)
    return m.group(1) if m else None


def match_const_constructor(text: str) -> str | None:
    m = _CONST_CONSTRUCTOR_RE.match(text)
    return m.group(1) if m else None


def match_field(text: str) -> tuple[str, str] | None:
    """Return (raw type text, field name) for a getter-only field."""
    m = _FIELD_RE.match(text)
    return (m.group(1), m.group(2)) if m else None


def parse_field_options(payload: str) -> FieldOptions:
    """Parse a `key[=value]` option list.

    `key="json_key"` (quotes optional) overrides the serialized key and a
    bare `enum` forces enum classification. Unknown tokens are ignored.
    """
    json_key: str | None = None
    force_enum = False
    for m in _OPTION_ITEM_RE.finditer(payload):
        key = m.group("key")
        value = m.group("value")
        if value is not None:
            if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                value = value[1:-1]
            if key == _KEY_OPTION:
                json_key = value
        elif key == _ENUM_OPTION:
            force_enum = True
    return FieldOptions(json_key=json_key, force_enum=force_enum)


def classify(raw: str) -> Token:
    """Classify one raw source line."""
    if match_marker(raw):
        return Marker(raw, "")

    payload = match_option_comment(raw)
    if payload is not None:
        return OptionComment(raw, "", payload)

    text = strip_comment(raw)
    if not text.strip():
        return Blank(raw, "")

    name = match_class_header(text)
    if name is not None:
        return ClassHeader(raw, text, name)

    name = match_const_constructor(text)
    if name is not None:
        return ConstConstructor(raw, text, name)

    field = match_field(text)
    if field is not None:
        return FieldDecl(raw, text, field[0], field[1])

    return Code(raw, text)


def split_lines(text: str) -> list[str]:
    """Split on line feeds only, dropping a trailing carriage return.

    Form feeds and Unicode line separators stay inside their line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def tokenize(text: str) -> Iterator[Token]:
    """Yield one token per source line, in order."""
    for raw in split_lines(text):
        yield classify(raw)
