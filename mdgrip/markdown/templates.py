"""HTML fragment templates (alert boxes, mermaid diagrams) rendered with Jinja2."""

from typing import Any

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from mdgrip.exceptions import TemplateRenderError
from mdgrip.markdown.models import AlertKind

MERMAID_TEMPLATE = "mermaid/mermaid.html"

# Singleton environment; templates are loaded once and cached by Jinja2
_environment: Environment | None = None


def create_environment() -> Environment:
    """Create the Jinja2 environment for the bundled fragment templates."""
    # nosemgrep: python.flask.security.xss.audit.direct-use-of-jinja2.direct-use-of-jinja2
    return Environment(
        loader=PackageLoader("mdgrip", "templates"),
        autoescape=select_autoescape(["html"]),
    )


def get_environment() -> Environment:
    """Get or create the singleton template environment."""
    global _environment
    if _environment is None:
        _environment = create_environment()
    return _environment


def render_template(name: str, **data: Any) -> str:
    """Render the fragment template `name` (e.g. `alert/note.html`).

    Raises:
        TemplateRenderError: the template is missing, invalid or fails to render.
    """
    try:
        return get_environment().get_template(name).render(**data)
    except TemplateError as e:
        raise TemplateRenderError(name, str(e)) from e


def render_alert_start(kind: AlertKind) -> str:
    """Opening markup of an alert box; the caller closes it with `</div>`."""
    return render_template(f"alert/{kind}.html", kind=kind)


def render_mermaid(content: str, theme: str) -> str:
    return render_template(MERMAID_TEMPLATE, content=content, theme=theme)
