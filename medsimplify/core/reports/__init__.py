"""
Report Export Module

Renders a simplified report as a downloadable PDF, embedding a
script-specific Noto Sans font for languages Helvetica cannot show.
"""
from .fonts import FontAsset, FontManifest, FontResolver, FONT_URLS
from .pdf_renderer import DocumentRenderer, RendererConfig, download_filename

__all__ = [
    "FontAsset",
    "FontManifest",
    "FontResolver",
    "FONT_URLS",
    "DocumentRenderer",
    "RendererConfig",
    "download_filename",
]
