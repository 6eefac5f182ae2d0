"""Top-level views of the Sweather app."""

from .dashboard import render_dashboard
from .wardrobe import render_wardrobe

__all__ = ["render_dashboard", "render_wardrobe"]
