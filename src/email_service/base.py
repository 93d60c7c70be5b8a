from abc import ABC, abstractmethod

from src.email_service.templates import Language


class EmailServiceBase(ABC):
    @abstractmethod
    async def send_rsvp_confirmation(
        self,
        to_address: str,
        guest_name: str,
        couple_names: str,
        attending: bool,
        guest_count: int | None,
        invitation_url: str,
        language: Language = Language.EN,
    ) -> None:
        pass

    @abstractmethod
    async def send_rsvp_notification(
        self,
        to_address: str,
        guest_name: str,
        guest_email: str,
        guest_phone: str | None,
        attending: bool,
        guest_count: int | None,
        message: str | None,
        couple_names: str,
        invitation_url: str,
        language: Language = Language.EN,
    ) -> None:
        """Tell the host about a new RSVP."""
        pass
