"""Notification: the composed alert email handed to a Notifier."""

from pydantic import BaseModel

from uptime_check.config.domain.settings import Settings


class Notification(BaseModel, frozen=True):
    """Everything a Notifier needs to deliver one alert email."""

    login: str
    password: str
    host: str
    port: str
    sender: str
    recipient: str
    subject: str
    body: str
    url: str


def compose_notification(settings: Settings, url: str) -> Notification:
    """
    Build the alert for url from settings.

    The sender falls back to the SMTP login when no author is configured. The URL
    is appended to subject and body as-is, without a separator, which is the
    format operators' existing filters and logs already expect.
    """
    return Notification(
        login=settings.smtp_user,
        password=settings.smtp_password,
        host=settings.smtp_host,
        port=settings.smtp_port,
        sender=settings.author or settings.smtp_user,
        recipient=settings.recipient,
        subject=settings.subject + url,
        body=settings.body + url,
        url=url,
    )
