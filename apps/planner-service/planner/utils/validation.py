"""Input validators shared by request schemas and client forms."""
import re

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

_URL_RE = re.compile(
    r"(https?://)?"
    r"(([a-z\d]([a-z\d-]*[a-z\d])?\.)+[a-z]{2,}"  # domain name
    r"|(\d{1,3}\.){3}\d{1,3})"  # or IPv4
    r"(:\d+)?"
    r"(/[-a-z\d%_.~+]*)*"
    r"(\?[;&a-z\d%_.~+=-]*)?"
    r"(#[-a-z\d_]*)?",
    re.IGNORECASE,
)


def is_valid_email(value: str) -> bool:
    return bool(value) and _EMAIL_RE.fullmatch(value) is not None


def is_valid_url(value: str) -> bool:
    return bool(value) and _URL_RE.fullmatch(value) is not None
