from __future__ import annotations

from .corpus import RenderCase, generate_render_cases, generate_sources, write_render_corpus

__all__ = ["RenderCase", "generate_render_cases", "generate_sources", "write_render_corpus"]
