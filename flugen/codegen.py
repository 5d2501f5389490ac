"""Render generated Dart units.

Takes the context from context_builder and produces the full text of a
`.flu.dart` companion unit.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Sequence

import jinja2

from .class_parser import parse_classes
from .context_builder import build_context
from .models import SourceClass
from .naming import part_of_name

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "model.flu.dart.j2"


@lru_cache(maxsize=None)
def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def render(classes: Sequence[SourceClass], part_of: str) -> str | None:
    """Render the generated unit for `classes`; None when there are none."""
    if not classes:
        return None
    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(**build_context(classes, part_of))


def generate_source(text: str, source_id: str) -> str | None:
    """Parse one source unit and render its generated companion text."""
    classes = parse_classes(text, source_id)
    return render(classes, part_of_name(source_id))
