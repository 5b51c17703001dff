"""SMTP implementation of the Notifier port."""

import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formatdate

from uptime_check.notification.domain.notification import Notification
from uptime_check.notification.infrastructure.errors import NotificationSendError

SMTP_TIMEOUT_SECONDS = 10.0
IMPLICIT_TLS_PORT = 465
LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})


def build_message(notification: Notification) -> EmailMessage:
    """Render a Notification as an RFC 5322 message.

    Raises:
        NotificationSendError: if a header value is unusable (e.g. contains a newline).
    """
    message = EmailMessage()
    try:
        message["From"] = notification.sender
        message["To"] = notification.recipient
        message["Subject"] = notification.subject
        message["Date"] = formatdate(localtime=True)
    except ValueError as exc:
        raise NotificationSendError(reason=f"invalid header: {exc}") from exc
    message.set_content(notification.body)
    return message


class SmtpNotifier:
    """Delivers notifications over SMTP with login authentication.

    Port 465 uses implicit TLS; any other port upgrades with STARTTLS. Credentials
    are only sent unencrypted to a local server. The SMTP login is the envelope
    sender.

    Satisfies the Notifier protocol structurally.
    """

    def __init__(self, timeout: float = SMTP_TIMEOUT_SECONDS) -> None:
        self._timeout = timeout

    def send(self, notification: Notification) -> None:
        """
        Send notification, blocking until the server accepted or rejected it.

        Raises:
            NotificationSendError: on an invalid port, a remote server without
                STARTTLS, credentials smtplib cannot encode, or any SMTP
                connection, auth or delivery failure.
        """
        try:
            port = int(notification.port)
        except ValueError as exc:
            raise NotificationSendError(
                reason=f"invalid SMTP port {notification.port!r}"
            ) from exc

        message = build_message(notification=notification)
        context = ssl.create_default_context()
        try:
            if port == IMPLICIT_TLS_PORT:
                with smtplib.SMTP_SSL(
                    notification.host, port, timeout=self._timeout, context=context
                ) as smtp:
                    self._deliver(smtp=smtp, notification=notification, message=message)
            else:
                with smtplib.SMTP(notification.host, port, timeout=self._timeout) as smtp:
                    smtp.ehlo()
                    if smtp.has_extn("starttls"):
                        smtp.starttls(context=context)
                        smtp.ehlo()
                    elif notification.host not in LOCAL_HOSTS:
                        raise NotificationSendError(
                            reason=f"{notification.host} does not offer STARTTLS,"
                            " refusing to send credentials unencrypted"
                        )
                    self._deliver(smtp=smtp, notification=notification, message=message)
        except (smtplib.SMTPException, OSError, ValueError) as exc:
            raise NotificationSendError(reason=f"{type(exc).__name__}: {exc}") from exc

    def _deliver(
        self, smtp: smtplib.SMTP, notification: Notification, message: EmailMessage
    ) -> None:
        smtp.login(notification.login, notification.password)
        smtp.send_message(
            message,
            from_addr=notification.login,
            to_addrs=[notification.recipient],
        )
