"""
Transactional Email Service

Renders the trip email templates and hands the result to the configured
delivery provider:

- smtp (default): any SMTP relay through `EmailService`
- resend: Resend HTTP API (install the ``resend`` extra)
- mailgun: Mailgun HTTP API through requests
"""

import os
import re
import logging
from typing import Optional, Dict, Any, List
from enum import Enum
from pathlib import Path

import requests
from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from planner.services.email_service import (
    DEFAULT_FROM_EMAIL,
    DEFAULT_FROM_NAME,
    EmailService,
    EmailServiceConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "email"


class EmailProvider(Enum):
    """Supported email delivery providers."""
    SMTP = "smtp"
    RESEND = "resend"
    MAILGUN = "mailgun"


class TransactionalEmailConfig:
    """Configuration for transactional email delivery."""

    def __init__(self):
        provider_name = os.getenv('EMAIL_PROVIDER', 'smtp').lower()
        try:
            self.provider = EmailProvider(provider_name)
        except ValueError:
            logger.error("Unknown email provider: %s", provider_name)
            self.provider = None

        self.from_email = os.getenv('FROM_EMAIL', DEFAULT_FROM_EMAIL)
        self.from_name = os.getenv('FROM_NAME', DEFAULT_FROM_NAME)
        self.reply_to_email = os.getenv('REPLY_TO_EMAIL', '')

        self.resend_api_key = os.getenv('RESEND_API_KEY', '')
        self.mailgun_api_key = os.getenv('MAILGUN_API_KEY', '')
        self.mailgun_domain = os.getenv('MAILGUN_DOMAIN', '')
        self.mailgun_base_url = os.getenv('MAILGUN_BASE_URL', 'https://api.mailgun.net/v3')

        self.template_dir = os.getenv('EMAIL_TEMPLATE_DIR', str(DEFAULT_TEMPLATE_DIR))

    @property
    def sender(self) -> str:
        return f"{self.from_name} <{self.from_email}>"

    def is_configured(self) -> bool:
        """Check if the selected provider has what it needs."""
        if not self.from_email or self.provider is None:
            return False
        if self.provider == EmailProvider.RESEND:
            return bool(self.resend_api_key)
        if self.provider == EmailProvider.MAILGUN:
            return bool(self.mailgun_api_key and self.mailgun_domain)
        return True

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not self.from_email:
            errors.append("FROM_EMAIL is required")
        if self.provider is None:
            errors.append("EMAIL_PROVIDER must be one of: smtp, resend, mailgun")
        elif self.provider == EmailProvider.RESEND and not self.resend_api_key:
            errors.append("RESEND_API_KEY is required for Resend provider")
        elif self.provider == EmailProvider.MAILGUN:
            if not self.mailgun_api_key:
                errors.append("MAILGUN_API_KEY is required for Mailgun provider")
            if not self.mailgun_domain:
                errors.append("MAILGUN_DOMAIN is required for Mailgun provider")
        return errors


class SmtpEmailProvider:
    """Adapter from the transactional interface to `EmailService`."""

    def __init__(self, config: TransactionalEmailConfig, smtp_config: Optional[EmailServiceConfig] = None):
        smtp_config = smtp_config or EmailServiceConfig()
        smtp_config.from_email = config.from_email
        smtp_config.from_name = config.from_name
        smtp_config.reply_to_email = config.reply_to_email
        self.smtp = EmailService(smtp_config)

    async def send_email(self, to_email, subject, html_content, text_content=None, to_name=None):
        return await self.smtp.send_email(
            to_email=to_email,
            subject=subject,
            html_content=html_content,
            text_content=text_content,
            to_name=to_name,
        )


class ResendEmailProvider:
    """Email delivery through Resend."""

    def __init__(self, config: TransactionalEmailConfig):
        self.config = config
        try:
            import resend
        except ImportError:
            logger.error("Resend library not installed. Install with: pip install 'planner-service[resend]'")
            raise
        resend.api_key = config.resend_api_key
        self.client = resend

    async def send_email(self, to_email, subject, html_content, text_content=None, to_name=None):
        email_data = {
            "from": self.config.sender,
            "to": [to_email],
            "subject": subject,
            "html": html_content,
        }
        if text_content:
            email_data["text"] = text_content
        if self.config.reply_to_email:
            email_data["reply_to"] = self.config.reply_to_email
        try:
            result = self.client.Emails.send(email_data)
        except Exception as e:
            return {'success': False, 'provider': 'resend', 'error': str(e)}
        return {'success': True, 'provider': 'resend', 'message_id': result['id']}


class MailgunEmailProvider:
    """Email delivery through the Mailgun messages API."""

    def __init__(self, config: TransactionalEmailConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()
        self.messages_url = f"{config.mailgun_base_url.rstrip('/')}/{config.mailgun_domain}/messages"

    async def send_email(self, to_email, subject, html_content, text_content=None, to_name=None):
        data = {
            "from": self.config.sender,
            "to": f"{to_name} <{to_email}>" if to_name else to_email,
            "subject": subject,
            "html": html_content,
        }
        if text_content:
            data["text"] = text_content
        if self.config.reply_to_email:
            data["h:Reply-To"] = self.config.reply_to_email
        try:
            response = self.session.post(
                self.messages_url,
                auth=("api", self.config.mailgun_api_key),
                data=data,
                timeout=(3, 30),
            )
        except requests.RequestException as e:
            return {'success': False, 'provider': 'mailgun', 'error': str(e)}
        if response.status_code != 200:
            return {
                'success': False,
                'provider': 'mailgun',
                'error': f"HTTP {response.status_code}: {response.text}",
            }
        return {'success': True, 'provider': 'mailgun', 'message_id': response.json().get('id', '')}


_PROVIDERS = {
    EmailProvider.SMTP: SmtpEmailProvider,
    EmailProvider.RESEND: ResendEmailProvider,
    EmailProvider.MAILGUN: MailgunEmailProvider,
}


class TransactionalEmailService:
    """Renders templates and delegates delivery to the configured provider."""

    def __init__(self, config: Optional[TransactionalEmailConfig] = None):
        self.config = config or TransactionalEmailConfig()
        self.provider_service = None
        self.template_env = Environment(
            loader=FileSystemLoader(self.config.template_dir),
            autoescape=select_autoescape(['html']),
        )
        if not Path(self.config.template_dir).exists():
            logger.warning("Email template directory not found: %s", self.config.template_dir)
        self._setup_provider()

    def _setup_provider(self):
        if not self.config.is_configured():
            logger.warning("Email service not configured: %s", ', '.join(self.config.validate()))
            return
        try:
            self.provider_service = _PROVIDERS[self.config.provider](self.config)
        except Exception as e:
            logger.error("Failed to initialize email provider %s: %s", self.config.provider.value, e)
            return
        logger.info("Initialized %s email provider", self.config.provider.value)

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None,
        to_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Send an email via the configured provider.

        Returns:
            Dict with 'success', 'provider', 'message_id' and 'error' keys
        """
        if not self.provider_service:
            return {
                'success': False,
                'error': 'Email service not configured or initialization failed'
            }

        logger.info("Sending email to %s via %s", to_email, self.config.provider.value)
        result = await self.provider_service.send_email(
            to_email=to_email,
            subject=subject,
            html_content=html_content,
            text_content=text_content,
            to_name=to_name,
        )
        if result['success']:
            logger.info("Email sent to %s via %s", to_email, result['provider'])
        else:
            logger.error("Email sending failed: %s", result['error'])
        return result

    def render_template(self, template_name: str, context: Dict[str, Any]) -> tuple[str, str]:
        """
        Render `<template_name>.html` and, when present, `<template_name>.txt`.

        Returns:
            Tuple of (html_content, text_content)
        """
        html_content = self.template_env.get_template(f"{template_name}.html").render(**context)
        try:
            text_content = self.template_env.get_template(f"{template_name}.txt").render(**context)
        except TemplateNotFound:
            text_content = self._html_to_text(html_content)
        return html_content, text_content

    def _html_to_text(self, html_content: str) -> str:
        """Convert HTML to basic text content."""
        text = re.sub(r'<[^>]+>', '', html_content)
        text = text.replace('&amp;', '&').replace('&lt;', '<').replace('&gt;', '>')
        text = text.replace('&quot;', '"').replace('&#39;', "'")
        return re.sub(r'\s+', ' ', text).strip()


_email_service = None


def get_transactional_email_service() -> TransactionalEmailService:
    """Get singleton transactional email service instance."""
    global _email_service
    if _email_service is None:
        _email_service = TransactionalEmailService()
    return _email_service
