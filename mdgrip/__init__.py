"""Render GitHub-flavored Markdown to HTML fragments for local preview."""

from mdgrip.config import Settings, Theme
from mdgrip.logging_config import configure_logging
from mdgrip.markdown import Parser, md_to_html

__all__ = ["Parser", "md_to_html", "Settings", "Theme", "configure_logging"]
