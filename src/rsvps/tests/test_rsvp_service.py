from uuid import uuid4

import pytest

from src.config.settings import settings
from src.email_service.templates import Language
from src.errors import NotFoundError, UnauthorizedError, ValidationError
from src.rsvps.service import RSVPSubmission
from src.tests.inmemory_models import (
    InMemoryDatabase,
    RecordingEmailService,
    classic_config,
    make_invitation_service,
    make_rsvp_service,
)

OWNER = "owner-1"


def attending(**overrides):
    data = {"name": "Amy", "email": "a@x.com", "attendance": True, "guest_count": 2}
    data.update(overrides)
    return data


@pytest.fixture
def db():
    return InMemoryDatabase()


@pytest.fixture
def email_service():
    return RecordingEmailService()


@pytest.fixture
def service(db, email_service):
    return make_rsvp_service(db, email_service=email_service)


@pytest.fixture
async def invitation(db):
    invitation_service = make_invitation_service(db)
    created = await invitation_service.create(OWNER, "jane-john", classic_config())
    return await invitation_service.publish(created.id, OWNER)


@pytest.mark.parametrize("guest_count", [1, 10])
def test_guest_count_bounds_are_inclusive(guest_count):
    assert RSVPSubmission.parse(attending(guest_count=guest_count)).guest_count == guest_count


@pytest.mark.parametrize("guest_count", [0, 11, None])
def test_guest_count_outside_bounds_is_rejected(guest_count):
    with pytest.raises(ValidationError) as exc_info:
        RSVPSubmission.parse(attending(guest_count=guest_count))

    assert exc_info.value.fields() == ["guest_count"]


@pytest.mark.parametrize("guest_count", [True, "2", 2.0])
def test_guest_count_must_be_a_json_integer(guest_count):
    with pytest.raises(ValidationError) as exc_info:
        RSVPSubmission.parse(attending(guest_count=guest_count))

    assert exc_info.value.fields() == ["guest_count"]


def test_guest_count_is_ignored_when_declining():
    """A declined RSVP with no or a nonsensical count is accepted and stores no count."""
    without_count = RSVPSubmission.parse({"name": "Amy", "email": "a@x.com", "attendance": False})
    with_count = RSVPSubmission.parse(
        {"name": "Amy", "email": "a@x.com", "attendance": False, "guest_count": 0}
    )

    assert without_count.guest_count is None
    assert with_count.guest_count is None


def test_every_failing_field_is_reported():
    with pytest.raises(ValidationError) as exc_info:
        RSVPSubmission.parse(
            {
                "name": "   ",
                "email": "not-an-email",
                "phone": "1" * 51,
                "attendance": True,
                "guest_count": 11,
                "message": "m" * 501,
            }
        )

    assert set(exc_info.value.fields()) == {"name", "email", "phone", "guest_count", "message"}


def test_attendance_is_required():
    with pytest.raises(ValidationError) as exc_info:
        RSVPSubmission.parse({"name": "Amy", "email": "a@x.com"})

    assert "attendance" in exc_info.value.fields()


def test_name_is_trimmed_and_limited():
    assert RSVPSubmission.parse(attending(name="  Amy  ")).name == "Amy"
    RSVPSubmission.parse(attending(name="n" * 100))
    with pytest.raises(ValidationError):
        RSVPSubmission.parse(attending(name="n" * 101))


def test_message_limit():
    RSVPSubmission.parse(attending(message="m" * 500))
    with pytest.raises(ValidationError):
        RSVPSubmission.parse(attending(message="m" * 501))


@pytest.mark.asyncio
async def test_submit_stores_rsvp_and_sends_confirmation(service, invitation, email_service):
    rsvp = await service.submit(invitation.id, RSVPSubmission.parse(attending()))

    assert rsvp.invitation_id == invitation.id
    assert rsvp.guest_count == 2
    assert email_service.sent == [
        {
            "to_address": "a@x.com",
            "guest_name": "Amy",
            "couple_names": "Jane & John",
            "attending": True,
            "guest_count": 2,
            "invitation_url": f"{settings.frontend_url}/jane-john",
            "language": Language.EN,
        }
    ]


@pytest.mark.asyncio
async def test_declined_rsvp_stores_no_guest_count(service, invitation):
    rsvp = await service.submit(
        invitation.id,
        RSVPSubmission.parse({"name": "Amy", "email": "a@x.com", "attendance": False}),
    )

    assert rsvp.attendance is False
    assert rsvp.guest_count is None


@pytest.mark.asyncio
async def test_email_failure_does_not_fail_the_rsvp(db, invitation, caplog):
    service = make_rsvp_service(db, email_service=RecordingEmailService(fail=True))

    rsvp = await service.submit(invitation.id, RSVPSubmission.parse(attending()))

    assert db.rsvps == [rsvp]
    assert "Failed to send RSVP confirmation" in caplog.text


@pytest.fixture
async def hosted_invitation(db):
    invitation_service = make_invitation_service(db)
    created = await invitation_service.create(
        OWNER, "jane-john", classic_config(), owner_email="host@example.com"
    )
    return await invitation_service.publish(created.id, OWNER)


@pytest.mark.asyncio
async def test_submit_notifies_the_host(service, hosted_invitation, email_service):
    await service.submit(
        hosted_invitation.id,
        RSVPSubmission.parse(attending(phone="0812", message="See you there!")),
    )

    assert email_service.notifications == [
        {
            "to_address": "host@example.com",
            "guest_name": "Amy",
            "guest_email": "a@x.com",
            "guest_phone": "0812",
            "attending": True,
            "guest_count": 2,
            "message": "See you there!",
            "couple_names": "Jane & John",
            "invitation_url": f"{settings.frontend_url}/jane-john",
            "language": Language.EN,
        }
    ]
    assert len(email_service.sent) == 1


@pytest.mark.asyncio
async def test_host_is_not_notified_without_an_address(service, invitation, email_service):
    await service.submit(invitation.id, RSVPSubmission.parse(attending()))

    assert email_service.notifications == []
    assert len(email_service.sent) == 1


@pytest.mark.asyncio
async def test_host_notification_failure_still_confirms_to_guest(db, hosted_invitation, caplog):
    email_service = RecordingEmailService(fail_notifications=True)
    service = make_rsvp_service(db, email_service=email_service)

    rsvp = await service.submit(hosted_invitation.id, RSVPSubmission.parse(attending()))

    assert db.rsvps == [rsvp]
    assert "Failed to notify host" in caplog.text
    assert len(email_service.sent) == 1


@pytest.mark.asyncio
async def test_updated_owner_email_receives_later_notifications(db, service, email_service):
    invitation_service = make_invitation_service(db)
    invitation = await invitation_service.create(
        OWNER, "jane-john", classic_config(), owner_email="old@example.com"
    )
    await invitation_service.update(invitation.id, OWNER, owner_email="new@example.com")

    await service.submit(invitation.id, RSVPSubmission.parse(attending()))

    assert email_service.notifications[0]["to_address"] == "new@example.com"


@pytest.mark.asyncio
async def test_repeated_submissions_are_not_deduplicated(service, invitation):
    await service.submit(invitation.id, RSVPSubmission.parse(attending()))
    await service.submit(invitation.id, RSVPSubmission.parse(attending(attendance=False)))

    summary = await service.summary(invitation.id)

    assert summary.total_responses == 2
    assert summary.attending == 1
    assert summary.declined == 1
    assert summary.total_guests == 2


@pytest.mark.asyncio
async def test_submit_to_unknown_invitation_is_not_found(service):
    with pytest.raises(NotFoundError):
        await service.submit(uuid4(), RSVPSubmission.parse(attending()))


@pytest.mark.asyncio
async def test_drafts_accept_rsvps_by_default(db, service):
    draft = await make_invitation_service(db).create(OWNER, "jane-john", classic_config())

    rsvp = await service.submit(draft.id, RSVPSubmission.parse(attending()))

    assert rsvp.invitation_id == draft.id


@pytest.mark.asyncio
async def test_drafts_reject_rsvps_when_publishing_is_required(db, service, monkeypatch):
    monkeypatch.setattr(settings, "submissions_require_published", True)
    draft = await make_invitation_service(db).create(OWNER, "jane-john", classic_config())

    with pytest.raises(NotFoundError):
        await service.submit(draft.id, RSVPSubmission.parse(attending()))


@pytest.mark.asyncio
async def test_indonesian_invitation_sends_indonesian_confirmation(db, email_service):
    invitation_service = make_invitation_service(db)
    invitation = await invitation_service.create(
        OWNER, "jane-john", classic_config(language="id")
    )
    service = make_rsvp_service(db, email_service=email_service)

    await service.submit(invitation.id, RSVPSubmission.parse(attending()))

    assert email_service.sent[0]["language"] == Language.ID


@pytest.mark.asyncio
async def test_owner_lists_rsvps_newest_first(service, invitation):
    first = await service.submit(invitation.id, RSVPSubmission.parse(attending(name="Amy")))
    second = await service.submit(invitation.id, RSVPSubmission.parse(attending(name="Bea")))

    rsvps = await service.list_for_owner(invitation.id, OWNER)

    assert [rsvp.id for rsvp in rsvps] == [second.id, first.id]


@pytest.mark.asyncio
async def test_only_the_owner_lists_rsvps(service, invitation):
    with pytest.raises(UnauthorizedError):
        await service.list_for_owner(invitation.id, "owner-2")
