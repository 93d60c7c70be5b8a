import logging
from typing import Protocol

import httpx

from src.email_service.base import EmailServiceBase
from src.email_service.templates import EmailTemplates, Language

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


class ResendEmailConfig(Protocol):
    resend_api_key: str
    emails_from: str


class ResendEmailService(EmailServiceBase):
    def __init__(
        self,
        config: ResendEmailConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._transport = transport

    async def _send(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> str | None:
        """Send email via Resend. Returns the Resend email id."""
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(
                RESEND_API_URL,
                headers={
                    "Authorization": f"Bearer {self._config.resend_api_key}",
                    "Content-Type": "application/json",
                },
                json={
                    "from": self._config.emails_from,
                    "to": [to_address],
                    "subject": subject,
                    "html": html_body,
                    "text": text_body,
                },
            )
            response.raise_for_status()

        resend_email_id = response.json().get("id")
        logger.info(f"Sent email {resend_email_id} to {to_address}")
        return resend_email_id

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
        subject, html_body, text_body = EmailTemplates.render_rsvp_confirmation(
            guest_name=guest_name,
            couple_names=couple_names,
            attending=attending,
            guest_count=guest_count,
            invitation_url=invitation_url,
            language=language,
        )
        await self._send(
            to_address=to_address,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
        )

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
        subject, html_body, text_body = EmailTemplates.render_rsvp_notification(
            guest_name=guest_name,
            guest_email=guest_email,
            guest_phone=guest_phone,
            attending=attending,
            guest_count=guest_count,
            message=message,
            couple_names=couple_names,
            invitation_url=invitation_url,
            language=language,
        )
        await self._send(
            to_address=to_address,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
        )
