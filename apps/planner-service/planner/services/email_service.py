"""
Email Service

SMTP delivery for trip emails through aiosmtplib. This is the default
transport of `TransactionalEmailService`.
"""

import os
import logging
from typing import Optional, Dict, Any, List
import aiosmtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from email.utils import formataddr, make_msgid

logger = logging.getLogger(__name__)

DEFAULT_FROM_EMAIL = 'hello@plann.er'
DEFAULT_FROM_NAME = 'plann.er Team'


class EmailServiceConfig:
    """SMTP configuration from environment variables."""

    def __init__(self):
        self.smtp_host = os.getenv('SMTP_HOST', 'localhost')
        self.smtp_port = int(os.getenv('SMTP_PORT', '587'))
        self.smtp_username = os.getenv('SMTP_USERNAME', '')
        self.smtp_password = os.getenv('SMTP_PASSWORD', '')
        self.smtp_use_tls = os.getenv('SMTP_USE_TLS', 'false').lower() == 'true'
        self.smtp_start_tls = os.getenv('SMTP_START_TLS', 'false').lower() == 'true'
        self.from_email = os.getenv('FROM_EMAIL', DEFAULT_FROM_EMAIL)
        self.from_name = os.getenv('FROM_NAME', DEFAULT_FROM_NAME)
        self.reply_to_email = os.getenv('REPLY_TO_EMAIL', '')
        self.timeout = float(os.getenv('SMTP_TIMEOUT', '10'))

    def is_configured(self) -> bool:
        return bool(self.smtp_host and self.smtp_port and self.from_email)

    def validate(self) -> List[str]:
        """Return a list of configuration errors, empty when valid."""
        errors = []
        if not self.smtp_host:
            errors.append("SMTP_HOST is required")
        if not self.smtp_port or self.smtp_port <= 0:
            errors.append("SMTP_PORT must be a positive integer")
        if not self.from_email:
            errors.append("FROM_EMAIL is required")
        if self.smtp_use_tls and self.smtp_start_tls:
            errors.append("Cannot use both implicit TLS and STARTTLS")
        return errors


class EmailService:
    """Sends multipart (text + HTML) messages over SMTP."""

    def __init__(self, config: Optional[EmailServiceConfig] = None):
        self.config = config or EmailServiceConfig()

    def build_message(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None,
        to_name: Optional[str] = None,
    ) -> MIMEMultipart:
        message = MIMEMultipart('alternative')
        message['From'] = formataddr((self.config.from_name, self.config.from_email))
        message['To'] = formataddr((to_name, to_email)) if to_name else to_email
        message['Subject'] = subject
        message['Message-ID'] = make_msgid(domain=self.config.from_email.split('@')[-1])
        if self.config.reply_to_email:
            message['Reply-To'] = self.config.reply_to_email

        # plain part first so clients prefer the HTML alternative
        if text_content:
            message.attach(MIMEText(text_content, 'plain', 'utf-8'))
        message.attach(MIMEText(html_content, 'html', 'utf-8'))
        return message

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None,
        to_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Send an email via SMTP.

        Returns:
            Dict with 'success', 'provider', and 'message_id' or 'error' keys
        """
        if not self.config.is_configured():
            return {'success': False, 'provider': 'smtp', 'error': 'Email service not configured'}

        message = self.build_message(to_email, subject, html_content, text_content, to_name)
        try:
            async with aiosmtplib.SMTP(
                hostname=self.config.smtp_host,
                port=self.config.smtp_port,
                use_tls=self.config.smtp_use_tls,
                start_tls=self.config.smtp_start_tls,
                timeout=self.config.timeout,
            ) as smtp:
                if self.config.smtp_username and self.config.smtp_password:
                    await smtp.login(self.config.smtp_username, self.config.smtp_password)
                await smtp.send_message(message)
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("SMTP delivery to %s failed: %s", to_email, e, exc_info=True)
            return {'success': False, 'provider': 'smtp', 'error': f"SMTP sending failed: {e}"}

        logger.info("Email sent to %s: %s", to_email, subject)
        return {'success': True, 'provider': 'smtp', 'message_id': message['Message-ID']}
