class RenderError(Exception):
    """Base exception for failures while rendering part of a document."""

    def __init__(self, message: str):
        super().__init__(message)


class TemplateRenderError(RenderError):
    """Raised when an HTML fragment template is missing or fails to render."""

    def __init__(self, template: str, reason: str, *, message: str | None = None):
        super().__init__(message or f"Failed to render template {template!r}: {reason}")
        self.template = template
        self.reason = reason
