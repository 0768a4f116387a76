"""
Render pull request comments from the jinja2 comment template.
"""

import logging
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
)

from plugin.src.errors import TemplateConfigError
from plugin.src.models.context import TemplateContext
from plugin.src.models.drone import StepStatus
from plugin.src.services.metadata import format_label

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
COMMENT_TEMPLATE_NAME = "comment.md.j2"

def build_environment(**options) -> Environment:
    env = Environment(
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        **options,
    )
    env.globals["format_label"] = format_label
    return env

class CommentRenderer:
    """Formats a TemplateContext as a GitHub markdown comment."""

    def __init__(self, template: Template):
        self.template = template

    @classmethod
    def from_directory(cls, directory: Path = TEMPLATE_DIR, name: str = COMMENT_TEMPLATE_NAME):
        env = build_environment(loader=FileSystemLoader(str(directory)))
        try:
            return cls(env.get_template(name))
        except TemplateError as e:
            raise TemplateConfigError(f"failed to load comment template {name}: {e}") from e

    @classmethod
    def from_string(cls, source: str):
        try:
            return cls(build_environment().from_string(source))
        except TemplateError as e:
            raise TemplateConfigError(f"invalid comment template: {e}") from e

    def render(self, context: TemplateContext) -> str:
        return self.template.render(
            **context.model_dump(),
            short_sha=context.short_sha,
            passing=context.status == StepStatus.PASSING,
        )

# Loaded once at import. A broken template fails the process on startup.
comment_renderer = CommentRenderer.from_directory()

def render_comment(context: TemplateContext) -> str:
    return comment_renderer.render(context)
