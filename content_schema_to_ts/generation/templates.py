"""
Jinja2 environment for the TypeScript templates.
"""

from __future__ import annotations

import functools
from pathlib import Path

import jinja2

TEMPLATE_DIR = Path(__file__).parent.parent / "templates" / "typescript"


@functools.cache
def get_environment() -> jinja2.Environment:
    """Build the template environment once per process."""
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        lstrip_blocks=True,
        trim_blocks=True,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )


def get_template(name: str) -> jinja2.Template:
    return get_environment().get_template(name)
