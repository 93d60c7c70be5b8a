import html
from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    EN = "en"
    ID = "id"


def escape_html(values: dict[str, object]) -> dict[str, object]:
    """Escape guest- and owner-supplied strings before they go into an HTML body."""
    return {
        key: html.escape(value) if isinstance(value, str) else value
        for key, value in values.items()
    }


@dataclass
class EmailTemplates:
    # English templates
    RSVP_CONFIRMATION_SUBJECT_EN = "Thank you for your RSVP to {couple_names}'s wedding!"
    RSVP_CONFIRMATION_HTML_EN = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
        <div style="text-align: center; margin-bottom: 30px;">
            <h1 style="color: #d4a373;">Thank You!</h1>
        </div>

        <p>Dear {guest_name},</p>

        <p>Thank you for responding to our wedding invitation!</p>

        <div style="background-color: #fefae0; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h2 style="color: #bc6c25; margin-top: 0;">Your Response</h2>
            <p><strong>Attending:</strong> {attending}</p>
            <p><strong>Guests:</strong> {guest_count}</p>
        </div>

        <p>You can find all the details of the day on our invitation:</p>
        <p style="word-break: break-all; color: #606c38;"><a href="{invitation_url}">{invitation_url}</a></p>

        <p>With love,<br>{couple_names}</p>
    </body>
    </html>
    """

    RSVP_CONFIRMATION_TEXT_EN = """
    Dear {guest_name},

    Thank you for responding to our wedding invitation!

    Your Response:
    - Attending: {attending}
    - Guests: {guest_count}

    You can find all the details of the day on our invitation:
    {invitation_url}

    With love,
    {couple_names}
    """

    ATTENDING_YES_EN = "Yes"
    ATTENDING_NO_EN = "No"

    # Indonesian templates
    RSVP_CONFIRMATION_SUBJECT_ID = "Terima kasih atas konfirmasi kehadiran Anda di pernikahan {couple_names}!"
    RSVP_CONFIRMATION_HTML_ID = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
        <div style="text-align: center; margin-bottom: 30px;">
            <h1 style="color: #d4a373;">Terima Kasih!</h1>
        </div>

        <p>Yth. {guest_name},</p>

        <p>Terima kasih telah membalas undangan pernikahan kami!</p>

        <div style="background-color: #fefae0; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h2 style="color: #bc6c25; margin-top: 0;">Konfirmasi Anda</h2>
            <p><strong>Hadir:</strong> {attending}</p>
            <p><strong>Jumlah tamu:</strong> {guest_count}</p>
        </div>

        <p>Detail acara dapat dilihat di undangan kami:</p>
        <p style="word-break: break-all; color: #606c38;"><a href="{invitation_url}">{invitation_url}</a></p>

        <p>Salam hangat,<br>{couple_names}</p>
    </body>
    </html>
    """

    RSVP_CONFIRMATION_TEXT_ID = """
    Yth. {guest_name},

    Terima kasih telah membalas undangan pernikahan kami!

    Konfirmasi Anda:
    - Hadir: {attending}
    - Jumlah tamu: {guest_count}

    Detail acara dapat dilihat di undangan kami:
    {invitation_url}

    Salam hangat,
    {couple_names}
    """

    ATTENDING_YES_ID = "Ya"
    ATTENDING_NO_ID = "Tidak"

    # Host notification, English
    RSVP_NOTIFICATION_SUBJECT_EN = "New RSVP: {guest_name} - {attending}"
    RSVP_NOTIFICATION_HTML_EN = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
        <h2 style="color: #333; border-bottom: 2px solid #eee; padding-bottom: 10px;">New RSVP Submission</h2>

        <div style="background-color: #f9f9f9; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h3 style="color: #555; margin-top: 0;">Guest Information</h3>
            <p><strong>Name:</strong> {guest_name}</p>
            <p><strong>Email:</strong> {guest_email}</p>
            <p><strong>Phone:</strong> {guest_phone}</p>
        </div>

        <div style="background-color: #fefae0; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h3 style="color: #555; margin-top: 0;">RSVP Status</h3>
            <p><strong>Will attend:</strong> {attending}</p>
            <p><strong>Number of guests:</strong> {guest_count}</p>
            <p><strong>Message:</strong> {message}</p>
        </div>

        <p style="color: #666; font-size: 14px;">This RSVP was submitted for {couple_names}: <a href="{invitation_url}">{invitation_url}</a></p>
    </body>
    </html>
    """

    RSVP_NOTIFICATION_TEXT_EN = """
    New RSVP Submission

    Guest Information:
    - Name: {guest_name}
    - Email: {guest_email}
    - Phone: {guest_phone}

    RSVP Status:
    - Will attend: {attending}
    - Number of guests: {guest_count}
    - Message: {message}

    This RSVP was submitted for {couple_names}: {invitation_url}
    """

    # Host notification, Indonesian
    RSVP_NOTIFICATION_SUBJECT_ID = "RSVP baru: {guest_name} - {attending}"
    RSVP_NOTIFICATION_HTML_ID = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
        <h2 style="color: #333; border-bottom: 2px solid #eee; padding-bottom: 10px;">Konfirmasi Kehadiran Baru</h2>

        <div style="background-color: #f9f9f9; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h3 style="color: #555; margin-top: 0;">Data Tamu</h3>
            <p><strong>Nama:</strong> {guest_name}</p>
            <p><strong>Email:</strong> {guest_email}</p>
            <p><strong>Telepon:</strong> {guest_phone}</p>
        </div>

        <div style="background-color: #fefae0; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h3 style="color: #555; margin-top: 0;">Status Kehadiran</h3>
            <p><strong>Hadir:</strong> {attending}</p>
            <p><strong>Jumlah tamu:</strong> {guest_count}</p>
            <p><strong>Pesan:</strong> {message}</p>
        </div>

        <p style="color: #666; font-size: 14px;">Dikirim untuk undangan {couple_names}: <a href="{invitation_url}">{invitation_url}</a></p>
    </body>
    </html>
    """

    RSVP_NOTIFICATION_TEXT_ID = """
    Konfirmasi Kehadiran Baru

    Data Tamu:
    - Nama: {guest_name}
    - Email: {guest_email}
    - Telepon: {guest_phone}

    Status Kehadiran:
    - Hadir: {attending}
    - Jumlah tamu: {guest_count}
    - Pesan: {message}

    Dikirim untuk undangan {couple_names}: {invitation_url}
    """

    @classmethod
    def get_rsvp_confirmation_templates(cls, language: Language) -> tuple[str, str, str]:
        """Get RSVP confirmation templates for a specific language.

        Returns: (subject, html_body, text_body)
        """
        lang_suffix = language.value.upper()
        subject = getattr(
            cls, f"RSVP_CONFIRMATION_SUBJECT_{lang_suffix}", cls.RSVP_CONFIRMATION_SUBJECT_EN
        )
        html = getattr(cls, f"RSVP_CONFIRMATION_HTML_{lang_suffix}", cls.RSVP_CONFIRMATION_HTML_EN)
        text = getattr(cls, f"RSVP_CONFIRMATION_TEXT_{lang_suffix}", cls.RSVP_CONFIRMATION_TEXT_EN)
        return subject, html, text

    @classmethod
    def attending_label(cls, attending: bool, language: Language) -> str:
        lang_suffix = language.value.upper()
        name = f"ATTENDING_YES_{lang_suffix}" if attending else f"ATTENDING_NO_{lang_suffix}"
        default = cls.ATTENDING_YES_EN if attending else cls.ATTENDING_NO_EN
        return getattr(cls, name, default)

    @classmethod
    def render_rsvp_confirmation(
        cls,
        guest_name: str,
        couple_names: str,
        attending: bool,
        guest_count: int | None,
        invitation_url: str,
        language: Language,
    ) -> tuple[str, str, str]:
        """Returns: (subject, html_body, text_body) with every placeholder filled."""
        subject, html_template, text_template = cls.get_rsvp_confirmation_templates(language)
        values = {
            "guest_name": guest_name,
            "couple_names": couple_names,
            "attending": cls.attending_label(attending, language),
            "guest_count": guest_count if attending and guest_count else "-",
            "invitation_url": invitation_url,
        }
        return (
            subject.format(**values),
            html_template.format(**escape_html(values)),
            text_template.format(**values),
        )

    @classmethod
    def get_rsvp_notification_templates(cls, language: Language) -> tuple[str, str, str]:
        """Returns: (subject, html_body, text_body) for the host notification."""
        lang_suffix = language.value.upper()
        subject = getattr(
            cls, f"RSVP_NOTIFICATION_SUBJECT_{lang_suffix}", cls.RSVP_NOTIFICATION_SUBJECT_EN
        )
        html = getattr(cls, f"RSVP_NOTIFICATION_HTML_{lang_suffix}", cls.RSVP_NOTIFICATION_HTML_EN)
        text = getattr(cls, f"RSVP_NOTIFICATION_TEXT_{lang_suffix}", cls.RSVP_NOTIFICATION_TEXT_EN)
        return subject, html, text

    @classmethod
    def render_rsvp_notification(
        cls,
        guest_name: str,
        guest_email: str,
        guest_phone: str | None,
        attending: bool,
        guest_count: int | None,
        message: str | None,
        couple_names: str,
        invitation_url: str,
        language: Language,
    ) -> tuple[str, str, str]:
        subject, html_template, text_template = cls.get_rsvp_notification_templates(language)
        values = {
            "guest_name": guest_name,
            "guest_email": guest_email,
            "guest_phone": guest_phone or "-",
            "attending": cls.attending_label(attending, language),
            "guest_count": guest_count if attending and guest_count else "-",
            "message": message or "-",
            "couple_names": couple_names,
            "invitation_url": invitation_url,
        }
        # Guest names end up in a mail header
        subject_values = {
            key: " ".join(value.split()) if isinstance(value, str) else value
            for key, value in values.items()
        }
        return (
            subject.format(**subject_values),
            html_template.format(**escape_html(values)),
            text_template.format(**values),
        )
