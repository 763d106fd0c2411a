# render.py
from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, TextIO

import jinja2

from errors import TemplateError
from funcs import template_funcs

# Name the ingress list is bound to inside templates
INGRESS_VAR = "Ingress"


def new_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.BaseLoader(),
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    funcs = template_funcs()
    env.filters.update(funcs)
    env.globals.update(funcs)
    return env


def load_template(path: str, env: Optional[jinja2.Environment] = None) -> jinja2.Template:
    env = env or new_environment()
    try:
        source = Path(path).read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateError(e, label=f"Reading template from {path!r}") from e

    try:
        return env.from_string(source)
    except jinja2.TemplateSyntaxError as e:
        raise TemplateError(e, label=f"Parsing template from {path!r}") from e


def execute(template: jinja2.Template, ingresses: List[dict], out: Optional[TextIO] = None) -> None:
    """Stream the rendered template to `out` (stdout by default).

    Chunks are written as they are produced, so a failure midway leaves the
    output that came before it in place.
    """
    if out is None:
        out = sys.stdout
    try:
        for chunk in template.generate({INGRESS_VAR: ingresses}):
            out.write(chunk)
    except BrokenPipeError:
        raise
    except Exception as e:
        raise TemplateError(e) from e
