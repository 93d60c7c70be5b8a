import json

import pytest

from src.errors import PayloadTooLargeError, UnknownTemplateError, ValidationError
from src.invitations.config_schema import (
    PosterConfig,
    StorybookConfig,
    merge_config,
    serialized_size,
    validate_config,
)
from src.invitations.dtos import TemplateId
from src.tests.inmemory_models import classic_config, poster_config

POSTER_TEMPLATES = {"memphis-abstract", "pixel-arcade"}


def test_classic_config_is_valid():
    """A minimal classic document validates as a storybook config."""
    validated = validate_config(classic_config())

    assert validated.template == TemplateId.CLASSIC
    assert isinstance(validated.model, StorybookConfig)
    assert validated.model.couple_names == "Jane & John"


@pytest.mark.parametrize("template", [t.value for t in TemplateId])
def test_every_template_has_a_schema(template):
    """Each known template id dispatches to a variant schema."""
    if template in POSTER_TEMPLATES:
        document = poster_config(template)
    else:
        document = classic_config(template=template)

    assert validate_config(document).template == TemplateId(template)


def test_document_is_returned_unchanged():
    """Extra keys survive and the stored document round-trips byte for byte."""
    document = classic_config(music={"url": "song.mp3", "autoplay": True}, language="id")
    document["couple"]["bride"]["nickname"] = "Janie"
    before = json.dumps(document)

    validated = validate_config(document)

    assert json.dumps(validated.document) == before
    assert validated.document is not document


def test_unknown_template_is_rejected():
    with pytest.raises(UnknownTemplateError):
        validate_config(classic_config(template="baroque"))


def test_missing_template_is_a_field_error():
    document = classic_config()
    del document["template"]

    with pytest.raises(ValidationError) as exc_info:
        validate_config(document)

    assert exc_info.value.fields() == ["template"]


def test_declared_template_must_match_document():
    with pytest.raises(ValidationError) as exc_info:
        validate_config(classic_config(), declared_template="floral-forest")

    assert exc_info.value.fields() == ["template"]


def test_all_failing_fields_are_reported_together():
    """Blank names and a bad event date are listed in one error."""
    document = classic_config()
    document["couple"]["bride"]["name"] = "   "
    document["couple"]["groom"]["name"] = ""
    document["events"][0]["date"] = "next summer"

    with pytest.raises(ValidationError) as exc_info:
        validate_config(document)

    assert set(exc_info.value.fields()) == {
        "couple.bride.name",
        "couple.groom.name",
        "events.0.date",
    }


def test_events_must_not_be_empty():
    with pytest.raises(ValidationError) as exc_info:
        validate_config(classic_config(events=[]))

    assert exc_info.value.fields() == ["events"]


def test_at_most_five_events():
    event = classic_config()["events"][0]

    validate_config(classic_config(events=[event] * 5))
    with pytest.raises(ValidationError):
        validate_config(classic_config(events=[event] * 6))


def test_at_most_twenty_photos():
    validate_config(classic_config(photos=[f"p{i}.jpg" for i in range(20)]))
    with pytest.raises(ValidationError) as exc_info:
        validate_config(classic_config(photos=[f"p{i}.jpg" for i in range(21)]))

    assert exc_info.value.fields() == ["photos"]


def test_event_date_accepts_date_and_datetime():
    document = classic_config()
    document["events"][0]["date"] = "2025-06-01T10:00:00"

    validate_config(document)


def test_poster_requires_colors():
    document = poster_config()
    del document["colors"]

    with pytest.raises(ValidationError) as exc_info:
        validate_config(document)

    assert exc_info.value.fields() == ["colors"]


def test_poster_registry_uses_links():
    document = poster_config(
        registry={"message": "Your presence is enough", "links": [{"name": "Shop", "url": "x"}]}
    )

    validated = validate_config(document)

    assert isinstance(validated.model, PosterConfig)
    assert validated.model.registry.links[0].name == "Shop"


def test_bank_records_need_every_field():
    document = classic_config(registry={"banks": [{"name": "BCA", "account": "", "holder": "J"}]})

    with pytest.raises(ValidationError) as exc_info:
        validate_config(document)

    assert exc_info.value.fields() == ["registry.banks.0.account"]


def test_oversized_document_is_rejected_before_shape_checks():
    """The size cap applies even when the template is unknown."""
    document = {"template": "baroque", "blob": "x" * 200}

    with pytest.raises(PayloadTooLargeError) as exc_info:
        validate_config(document, max_bytes=100)

    assert exc_info.value.limit == 100
    assert exc_info.value.size == serialized_size(document)


def test_document_exactly_at_the_cap_is_accepted():
    document = classic_config()

    validate_config(document, max_bytes=serialized_size(document))


def test_size_counts_utf8_bytes():
    assert serialized_size({"a": "é"}) == len('{"a":"é"}'.encode("utf-8"))


def test_size_check_can_be_skipped_for_stored_documents():
    validate_config(classic_config(), max_bytes=10, check_size=False)


def test_non_object_document_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        validate_config(["classic"])

    assert exc_info.value.fields() == ["config"]


def test_merge_config_merges_objects_and_replaces_lists():
    current = classic_config(photos=["a.jpg", "b.jpg"])

    merged = merge_config(
        current,
        {"couple": {"bride": {"parents": "Mr. & Mrs. Doe"}}, "photos": ["c.jpg"]},
    )

    assert merged["couple"]["bride"] == {"name": "Jane", "parents": "Mr. & Mrs. Doe"}
    assert merged["couple"]["groom"] == {"name": "John"}
    assert merged["photos"] == ["c.jpg"]
    assert current["photos"] == ["a.jpg", "b.jpg"]
