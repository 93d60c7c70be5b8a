from src.rendering.registry import RENDERERS, get_renderer, render
from src.rendering.sections import RenderableDocument, Section, SectionName

__all__ = [
    "RENDERERS",
    "RenderableDocument",
    "Section",
    "SectionName",
    "get_renderer",
    "render",
]
