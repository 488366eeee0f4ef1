from unittest.mock import AsyncMock, MagicMock, patch

import aiosmtplib
import pytest

from planner.services.email_service import EmailService, EmailServiceConfig


@pytest.fixture(autouse=True)
def _smtp_env(monkeypatch):
    for k in ["SMTP_USERNAME", "SMTP_PASSWORD", "SMTP_USE_TLS", "SMTP_START_TLS", "REPLY_TO_EMAIL", "FROM_NAME"]:
        monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("SMTP_HOST", "smtp.example.com")
    monkeypatch.setenv("SMTP_PORT", "2525")
    monkeypatch.setenv("FROM_EMAIL", "hello@plann.er")


def _smtp_mock():
    smtp = MagicMock()
    smtp.__aenter__ = AsyncMock(return_value=smtp)
    smtp.__aexit__ = AsyncMock(return_value=False)
    smtp.login = AsyncMock()
    smtp.send_message = AsyncMock()
    return smtp


def test_config_defaults_and_validation(monkeypatch):
    cfg = EmailServiceConfig()
    assert cfg.smtp_port == 2525
    assert cfg.from_name == "plann.er Team"
    assert cfg.validate() == []

    monkeypatch.setenv("SMTP_HOST", "")
    monkeypatch.setenv("SMTP_USE_TLS", "true")
    monkeypatch.setenv("SMTP_START_TLS", "true")
    errs = EmailServiceConfig().validate()
    assert any("SMTP_HOST" in e for e in errs)
    assert any("STARTTLS" in e for e in errs)


def test_build_message_headers_and_parts(monkeypatch):
    monkeypatch.setenv("REPLY_TO_EMAIL", "support@plann.er")
    message = EmailService().build_message(
        "guest@example.com", "Confirm", "<p>Hi</p>", "Hi", to_name="Guest"
    )
    # "." is an RFC 5322 special, so the display name is quoted
    assert message["From"] == '"plann.er Team" <hello@plann.er>'
    assert message["To"] == "Guest <guest@example.com>"
    assert message["Reply-To"] == "support@plann.er"
    assert message["Message-ID"].endswith("@plann.er>")
    assert [p.get_content_type() for p in message.get_payload()] == ["text/plain", "text/html"]


@pytest.mark.asyncio
async def test_send_email_success():
    smtp = _smtp_mock()
    with patch("planner.services.email_service.aiosmtplib.SMTP", return_value=smtp) as smtp_cls:
        out = await EmailService().send_email("guest@example.com", "Subject", "<b>Hi</b>", "Hi")
    assert out["success"] is True
    assert out["provider"] == "smtp"
    assert out["message_id"]
    smtp_cls.assert_called_once_with(
        hostname="smtp.example.com", port=2525, use_tls=False, start_tls=False, timeout=10.0
    )
    smtp.login.assert_not_awaited()
    smtp.send_message.assert_awaited_once()


@pytest.mark.asyncio
async def test_send_email_logs_in_with_credentials(monkeypatch):
    monkeypatch.setenv("SMTP_USERNAME", "user")
    monkeypatch.setenv("SMTP_PASSWORD", "secret")
    smtp = _smtp_mock()
    with patch("planner.services.email_service.aiosmtplib.SMTP", return_value=smtp):
        await EmailService().send_email("guest@example.com", "Subject", "<b>Hi</b>")
    smtp.login.assert_awaited_once_with("user", "secret")


@pytest.mark.asyncio
async def test_send_email_smtp_failure():
    smtp = _smtp_mock()
    smtp.send_message.side_effect = aiosmtplib.SMTPException("mailbox unavailable")
    with patch("planner.services.email_service.aiosmtplib.SMTP", return_value=smtp):
        out = await EmailService().send_email("guest@example.com", "Subject", "<b>Hi</b>")
    assert out["success"] is False
    assert "mailbox unavailable" in out["error"]


@pytest.mark.asyncio
async def test_send_email_not_configured(monkeypatch):
    monkeypatch.setenv("SMTP_HOST", "")
    out = await EmailService().send_email("guest@example.com", "Subject", "<b>Hi</b>")
    assert out == {'success': False, 'provider': 'smtp', 'error': 'Email service not configured'}
