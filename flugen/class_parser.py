"""Extract annotated model declarations from a Dart source unit.

A line-oriented state machine over grammar tokens:

  SEEKING    waiting for the `// @flu` marker
  IN_HEADER  the next non-blank line must be `abstract class _Name {`
  IN_BODY    inside the class block, tracking brace depth from 1

Fields and the const constructor are only recognized at depth 1, so
method bodies and other members are skipped by brace counting alone.
An annotated block still open at end of input is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .grammar import (
    Blank,
    ClassHeader,
    ConstConstructor,
    FieldDecl,
    Marker,
    OptionComment,
    Token,
    brace_delta,
    parse_field_options,
    tokenize,
)
from .logging import get_logger
from .models import Field, SourceClass
from .type_resolver import resolve_type

logger = get_logger("parser")


class ParserState(Enum):
    SEEKING = "seeking"
    IN_HEADER = "in_header"
    IN_BODY = "in_body"


@dataclass
class _ClassBuilder:
    name: str
    has_const_constructor: bool = False
    fields: list[Field] = field(default_factory=list)

    def build(self) -> SourceClass:
        return SourceClass(self.name, self.has_const_constructor, tuple(self.fields))


def _field_from(token: FieldDecl, previous: Token | None) -> Field:
    """Build a field, taking options from the option comment right above it."""
    options = None
    if isinstance(previous, OptionComment):
        options = parse_field_options(previous.payload)
    return Field(token.name, resolve_type(token.type_text, options), options)


def parse_classes(text: str, source_id: str = "<string>") -> list[SourceClass]:
    """Parse every annotated class in `text`, in declaration order."""
    classes: list[SourceClass] = []
    state = ParserState.SEEKING
    current: _ClassBuilder | None = None
    depth = 0
    previous: Token | None = None

    for lineno, token in enumerate(tokenize(text), start=1):
        prev, previous = previous, token

        if state is ParserState.SEEKING:
            if isinstance(token, Marker):
                state = ParserState.IN_HEADER
            continue

        if state is ParserState.IN_HEADER:
            if isinstance(token, (Blank, Marker, OptionComment)):
                continue
            if isinstance(token, ClassHeader):
                if token.closed:
                    classes.append(_ClassBuilder(token.name).build())
                    state = ParserState.SEEKING
                else:
                    current = _ClassBuilder(token.name)
                    depth = 1
                    state = ParserState.IN_BODY
            else:
                logger.debug(
                    "%s:%d: marker not followed by a class header", source_id, lineno
                )
                state = ParserState.SEEKING
            continue

        if current is None or isinstance(token, (Blank, Marker, OptionComment)):
            continue

        if depth == 1 and isinstance(token, ConstConstructor) and token.name == current.name:
            current.has_const_constructor = True
            continue

        if depth == 1 and isinstance(token, FieldDecl):
            current.fields.append(_field_from(token, prev))
            continue

        depth += brace_delta(token.text)
        if depth <= 0:
            classes.append(current.build())
            current = None
            state = ParserState.SEEKING

    if current is not None:
        logger.debug("%s: unterminated class _%s dropped", source_id, current.name)

    return classes
