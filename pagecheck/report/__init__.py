"""pagecheck report package: text renderings and the sinks they go to."""

from .formatter import console_lines, render_comment_markdown, render_console, render_summary_markdown
from .sinks import append_summary, post_comment, publish_comment

__all__ = [
    "append_summary",
    "console_lines",
    "post_comment",
    "publish_comment",
    "render_comment_markdown",
    "render_console",
    "render_summary_markdown",
]
