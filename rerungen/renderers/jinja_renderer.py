"""
Jinja2-based runner renderers.

Renders runner descriptors to Java source with the bundled templates,
or with same-named templates from a caller supplied directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError, TemplateNotFound

from ..errors import RenderError
from ..shared import RenderContext, RunnerDescriptor
from .base import RunnerRenderer

TEMPLATES_DIR = Path(__file__).parent / "templates"

_JAVA_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def java_string(value: Any) -> str:
    """Escape a value for use inside a Java string literal."""
    out = []
    for ch in str(value):
        if ch in _JAVA_ESCAPES:
            out.append(_JAVA_ESCAPES[ch])
        elif ch < " " or ch == "\x7f":
            out.append("\\%03o" % ord(ch))
        else:
            out.append(ch)
    return "".join(out)


def build_environment(templates_dir: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["java_string"] = java_string
    return env


class JinjaRunnerRenderer(RunnerRenderer):
    """
    Runner renderer backed by a Jinja2 template.

    Subclasses choose the template through ``template_name``.
    """

    template_name: str = ""

    def __init__(self, templates_dir: Optional[Union[str, Path]] = None) -> None:
        self.templates_dir = Path(templates_dir) if templates_dir else TEMPLATES_DIR
        self._env: Optional[Environment] = None

    @property
    def env(self) -> Environment:
        if self._env is None:
            self._env = build_environment(self.templates_dir)
        return self._env

    def _load_template(self) -> Template:
        if not self.template_name:
            raise RenderError(f"{type(self).__name__} has no runner template configured")
        try:
            return self.env.get_template(self.template_name)
        except TemplateNotFound as e:
            raise RenderError(
                f"Runner template '{self.template_name}' not found in {self.templates_dir}",
                path=self.templates_dir / self.template_name,
            ) from e
        except TemplateError as e:
            raise RenderError(f"Invalid runner template '{self.template_name}': {e}") from e

    def template_values(self, descriptor: RunnerDescriptor, context: RenderContext) -> Dict[str, Any]:
        return {
            "package_name": context.package_name,
            "class_name": descriptor.class_name,
            "feature": descriptor.scenario,
            "plugins": list(descriptor.output_plugins),
            "glue": context.glue,
            "strict": context.strict,
            "monochrome": context.monochrome,
        }

    def render_text(self, descriptor: RunnerDescriptor, context: RenderContext) -> str:
        template = self._load_template()
        try:
            return template.render(self.template_values(descriptor, context))
        except TemplateError as e:
            raise RenderError(f"Failed to render {descriptor.class_name}: {e}") from e

    def render(self, descriptor: RunnerDescriptor, context: RenderContext, sink: TextIO) -> None:
        sink.write(self.render_text(descriptor, context))


class JunitRunnerRenderer(JinjaRunnerRenderer):
    """Cucumber JUnit runner (@RunWith(Cucumber.class))."""

    template_name = "cucumber-junit-runner.java.j2"


class SerenityRunnerRenderer(JinjaRunnerRenderer):
    """Serenity BDD Cucumber runner (@RunWith(CucumberWithSerenity.class))."""

    template_name = "cucumber-serenity-runner.java.j2"
