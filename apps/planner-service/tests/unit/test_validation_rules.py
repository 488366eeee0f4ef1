import pytest

from planner.utils.validation import is_valid_email, is_valid_url


@pytest.mark.parametrize("value", ["a@b.co", "diego.fernandes@rocketseat.com.br", "x+tag@mail.io"])
def test_valid_emails(value):
    assert is_valid_email(value)


@pytest.mark.parametrize("value", ["", "plain", "a@b", "a b@c.com", "@b.com", "a@@b.com"])
def test_invalid_emails(value):
    assert not is_valid_email(value)


@pytest.mark.parametrize("value", [
    "https://www.airbnb.com/rooms/123",
    "http://example.com",
    "example.com",
    "sub.example.co.uk/path/to?x=1&y=2#top",
    "HTTPS://EXAMPLE.COM",
    "http://192.168.0.1:8080/admin",
])
def test_valid_urls(value):
    assert is_valid_url(value)


@pytest.mark.parametrize("value", ["", "not a url", "ftp://example.com", "http://", "example", "-bad.com"])
def test_invalid_urls(value):
    assert not is_valid_url(value)


def test_long_garbage_url_is_rejected_quickly():
    assert not is_valid_url("a" * 5000 + "!")
