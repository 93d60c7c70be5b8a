from src.errors import UnknownTemplateError
from src.invitations.config_schema import ValidatedConfig
from src.invitations.dtos import TemplateId
from src.rendering.renderers import (
    PosterRenderer,
    StorybookRenderer,
    StorybookSkinRenderer,
    TemplateRenderer,
)
from src.rendering.sections import RenderableDocument

RENDERERS: dict[TemplateId, TemplateRenderer] = {
    TemplateId.CLASSIC: StorybookRenderer(),
    TemplateId.FLORAL_FOREST: StorybookSkinRenderer(),
    TemplateId.COLORFUL_LOVE_JOY: StorybookSkinRenderer(),
    TemplateId.COMIC_POP_ART: StorybookSkinRenderer(),
    TemplateId.MONOCHROME_VINTAGE: StorybookSkinRenderer(),
    TemplateId.MEMPHIS_ABSTRACT: PosterRenderer(),
    TemplateId.PIXEL_ARCADE: PosterRenderer(),
}


def get_renderer(template: TemplateId | str) -> TemplateRenderer:
    try:
        return RENDERERS[TemplateId(template)]
    except (KeyError, ValueError):
        raise UnknownTemplateError(template)


def render(config: ValidatedConfig) -> RenderableDocument:
    return get_renderer(config.template).render(config)
