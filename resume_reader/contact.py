import re
from typing import Dict, Optional

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_RE = re.compile(r"(\+?\d{1,3}[\s.-]?)?(\(?\d{3}\)?[\s.-]?)\d{3}[\s.-]?\d{4}")
URL_RE = re.compile(r"(https?://\S+|www\.\S+|\bgithub\.com/\S+|\blinkedin\.com/\S+)", re.IGNORECASE)

# trailing punctuation picked up from prose ("see github.com/me).")
_URL_TRAIL = ".,;:)]}>\"'"


def _first_match(rx: re.Pattern, text: str) -> Optional[str]:
    m = rx.search(text)
    return m.group(0) if m else None


def _clean_url(url: str) -> str:
    return url.rstrip(_URL_TRAIL)


def extract_links(text: str) -> Dict[str, Optional[str]]:
    """Pick a LinkedIn profile and one portfolio-like URL (GitHub preferred) from resume text."""
    urls = [_clean_url(u) for u in URL_RE.findall(text or "")]
    linkedin = next((u for u in urls if "linkedin.com" in u.lower()), None)
    github = next((u for u in urls if "github.com" in u.lower()), None)
    other = next((u for u in urls if u != linkedin and u != github), None)
    return {
        "linkedin_url": linkedin,
        "portfolio_url": github or other,
    }


def extract_contact(text: str) -> Dict[str, Optional[str]]:
    return {
        "email": _first_match(EMAIL_RE, text or ""),
        "phone": _first_match(PHONE_RE, text or ""),
        **extract_links(text),
    }
