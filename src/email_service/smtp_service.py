import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from src.config.settings import settings
from src.email_service.base import EmailServiceBase
from src.email_service.templates import EmailTemplates, Language


class SMTPEmailService(EmailServiceBase):
    def __init__(self):
        self.host = settings.smtp_host
        self.port = settings.smtp_port
        self.username = settings.smtp_user
        self.password = settings.smtp_password
        self.from_address = settings.emails_from

    def _create_message(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self.from_address
        msg["To"] = to_address

        msg.attach(MIMEText(text_body, "plain"))
        msg.attach(MIMEText(html_body, "html"))

        return msg

    def _send(self, msg: MIMEMultipart) -> None:
        with smtplib.SMTP(self.host, self.port) as server:
            if self.username and self.password:
                server.starttls()
                server.login(self.username, self.password)
            server.send_message(msg)

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
        msg = self._create_message(
            to_address=to_address,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
        )
        # smtplib blocks
        await asyncio.to_thread(self._send, msg)

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
        msg = self._create_message(
            to_address=to_address,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
        )
        await asyncio.to_thread(self._send, msg)
