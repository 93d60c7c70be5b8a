"""Invitation configuration documents and their per-template schemas.

A configuration is a JSON document tagged by ``template``. Every template
belongs to one variant (storybook or poster) and each variant has its own
required fields. Validation is a pure check. The document that passes is
returned unchanged, so what is stored is exactly what the owner sent.
"""

import copy
import json
from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictStr, StringConstraints
from pydantic import ValidationError as PydanticValidationError

from src.config.settings import settings
from src.errors import (
    PayloadTooLargeError,
    UnknownTemplateError,
    ValidationError,
    field_errors_from_pydantic,
)
from src.invitations.dtos import TemplateId

MAX_EVENTS = 5
MAX_PHOTOS = 20
MAX_REGISTRY_RECORDS = 5


def _check_iso_datetime(value: str) -> str:
    try:
        datetime.fromisoformat(value)
    except ValueError:
        raise ValueError("must be an ISO-8601 date or date-time")
    return value


NonEmptyStr = Annotated[StrictStr, StringConstraints(strip_whitespace=True, min_length=1)]
IsoDateTimeStr = Annotated[StrictStr, AfterValidator(_check_iso_datetime)]


class _Schema(BaseModel):
    # Owners may keep extra keys (nicknames, maps links, music...), they are stored as sent.
    model_config = ConfigDict(extra="allow")


class Person(_Schema):
    name: NonEmptyStr
    parents: StrictStr | None = None
    photo: StrictStr | None = None


class Couple(_Schema):
    bride: Person
    groom: Person


class Event(_Schema):
    name: NonEmptyStr
    date: IsoDateTimeStr
    time: NonEmptyStr
    venue: NonEmptyStr
    address: NonEmptyStr


class BankAccount(_Schema):
    name: NonEmptyStr
    account: NonEmptyStr
    holder: NonEmptyStr


class RegistryLink(_Schema):
    name: NonEmptyStr
    url: NonEmptyStr


class SeedWish(_Schema):
    """Owner-authored wish shown before any guest has signed the guestbook."""

    name: NonEmptyStr
    message: NonEmptyStr
    date: IsoDateTimeStr


class BankRegistry(_Schema):
    banks: list[BankAccount] = Field(default_factory=list, max_length=MAX_REGISTRY_RECORDS)


class LinkRegistry(_Schema):
    message: StrictStr | None = None
    links: list[RegistryLink] = Field(default_factory=list, max_length=MAX_REGISTRY_RECORDS)


class Palette(_Schema):
    primary: NonEmptyStr
    secondary: NonEmptyStr
    accent: NonEmptyStr


class InvitationConfigBase(_Schema):
    template: StrictStr
    couple: Couple
    events: list[Event] = Field(min_length=1, max_length=MAX_EVENTS)
    photos: list[StrictStr] = Field(default_factory=list, max_length=MAX_PHOTOS)
    wishes: list[SeedWish] = Field(default_factory=list)

    @property
    def couple_names(self) -> str:
        return f"{self.couple.bride.name.strip()} & {self.couple.groom.name.strip()}"

    @property
    def first_event(self) -> Event:
        return self.events[0]


class StorybookConfig(InvitationConfigBase):
    """Classic, floral, colorful, comic and vintage skins: gifts by bank transfer."""

    registry: BankRegistry | None = None


class PosterConfig(InvitationConfigBase):
    """Memphis and pixel skins: a colour palette and registry links."""

    colors: Palette
    registry: LinkRegistry | None = None


TEMPLATE_SCHEMAS: dict[TemplateId, type[InvitationConfigBase]] = {
    TemplateId.CLASSIC: StorybookConfig,
    TemplateId.FLORAL_FOREST: StorybookConfig,
    TemplateId.COLORFUL_LOVE_JOY: StorybookConfig,
    TemplateId.COMIC_POP_ART: StorybookConfig,
    TemplateId.MONOCHROME_VINTAGE: StorybookConfig,
    TemplateId.MEMPHIS_ABSTRACT: PosterConfig,
    TemplateId.PIXEL_ARCADE: PosterConfig,
}


@dataclass(frozen=True)
class ValidatedConfig:
    """A configuration that passed validation for ``template``."""

    template: TemplateId
    model: InvitationConfigBase
    document: dict[str, Any]


def serialized_size(document: Any) -> int:
    """Size in bytes of the compact UTF-8 JSON encoding of ``document``."""
    encoded = json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    return len(encoded.encode("utf-8"))


def resolve_template(value: Any) -> TemplateId:
    try:
        return TemplateId(value)
    except ValueError:
        raise UnknownTemplateError(value)


def validate_config(
    document: Any,
    declared_template: TemplateId | str | None = None,
    max_bytes: int | None = None,
    check_size: bool = True,
) -> ValidatedConfig:
    """Validate ``document`` against the schema of its template.

    ``check_size=False`` skips the size cap, for documents that were already
    accepted and are only being loaded again.

    Raises:
        ValidationError: the document is not an object, is not JSON
            serializable, or has failing fields (all of them are listed).
        PayloadTooLargeError: the serialized document exceeds the size cap.
        UnknownTemplateError: the template is not a known identifier.
    """
    limit = settings.config_max_bytes if max_bytes is None else max_bytes

    if not isinstance(document, dict):
        raise ValidationError.single("config", "Configuration must be an object")

    try:
        size = serialized_size(document)
    except (TypeError, ValueError):
        raise ValidationError.single("config", "Configuration must be JSON serializable")
    if check_size and size > limit:
        raise PayloadTooLargeError(size=size, limit=limit)

    if "template" not in document:
        raise ValidationError.single("template", "Field required")
    template = resolve_template(document["template"])
    if declared_template is not None and resolve_template(declared_template) != template:
        raise ValidationError.single(
            "template", f"Does not match the declared template '{declared_template}'"
        )

    schema = TEMPLATE_SCHEMAS[template]
    try:
        model = schema.model_validate(document)
    except PydanticValidationError as exc:
        raise ValidationError(
            field_errors_from_pydantic(exc), message="Configuration validation failed"
        )

    return ValidatedConfig(template=template, model=model, document=copy.deepcopy(document))


def merge_config(current: dict[str, Any], patch: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge ``patch`` into a copy of ``current``.

    Objects merge key by key; lists and scalars in ``patch`` replace.
    """
    merged = copy.deepcopy(current)
    for key, value in patch.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
