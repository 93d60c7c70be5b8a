"""Slug format rules and slug suggestions."""

import re
import secrets
import string
from collections.abc import Awaitable, Callable

from src.errors import FieldError

SLUG_MIN_LENGTH = 3
SLUG_MAX_LENGTH = 50
SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")

RESERVED_SLUGS = frozenset(
    {
        "admin", "api", "auth", "www", "mail", "email", "support", "help",
        "login", "logout", "signup", "register", "dashboard", "settings",
        "profile", "account", "user", "users", "guest", "guests", "rsvp",
        "invitation", "invitations", "wedding", "marriage", "ceremony",
        "reception", "party", "event", "events", "gallery", "photos",
        "videos", "about", "contact", "privacy", "terms", "legal",
        "copyright", "license", "sitemap", "robots", "favicon", "assets",
        "static", "public", "private", "secure", "cdn", "app", "application",
        "healthz", "check-slug",
    }
)

SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
MAX_SUFFIX_ATTEMPTS = 10


def validate_slug(slug: str) -> list[FieldError]:
    """Return every format problem with ``slug`` (empty when valid)."""
    errors = []
    if len(slug) < SLUG_MIN_LENGTH:
        errors.append(FieldError("slug", f"Slug must be at least {SLUG_MIN_LENGTH} characters"))
    if len(slug) > SLUG_MAX_LENGTH:
        errors.append(
            FieldError("slug", f"Slug must be {SLUG_MAX_LENGTH} characters or less")
        )
    if not SLUG_PATTERN.match(slug):
        errors.append(
            FieldError("slug", "Slug can only contain lowercase letters, numbers, and hyphens")
        )
    if slug.lower() in RESERVED_SLUGS:
        errors.append(FieldError("slug", "This slug is reserved and cannot be used"))
    return errors


def clean_slug(text: str) -> str:
    """Lowercase ``text`` and collapse everything but letters and digits into single hyphens."""
    text = text.lower().strip()
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[\s_-]+", "-", text)
    return text.strip("-")


def random_suffix(length: int = 6) -> str:
    return "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(length))


def slug_candidates(bride_name: str, groom_name: str) -> list[str]:
    bride = clean_slug(bride_name)
    groom = clean_slug(groom_name)
    combinations = [
        f"{bride}-{groom}",
        f"{groom}-{bride}",
        f"{bride}-and-{groom}",
        f"{groom}-and-{bride}",
    ]
    candidates = [combo for combo in combinations if bride and groom and not validate_slug(combo)]
    if not candidates:
        # Combinations too long: fall back to the shorter name
        fallback = bride if len(bride) <= len(groom) else groom
        candidates = [fallback if not validate_slug(fallback) else "wedding-day"]
    return candidates


async def suggest_slug(
    bride_name: str,
    groom_name: str,
    is_taken: Callable[[str], Awaitable[bool]],
) -> str:
    """Suggest a free slug built from the couple's names.

    Tries the plain name combinations first, then the first candidate with a
    random suffix, and finally a random ``wedding-xxxxxxxx`` slug. The
    suggestion is advisory: creation still relies on the store's unique
    constraint.
    """
    candidates = slug_candidates(bride_name, groom_name)
    for candidate in candidates:
        if not await is_taken(candidate):
            return candidate

    base = candidates[0][: SLUG_MAX_LENGTH - 7]
    for _ in range(MAX_SUFFIX_ATTEMPTS):
        candidate = f"{base}-{random_suffix()}"
        if not await is_taken(candidate):
            return candidate

    return f"wedding-{random_suffix(8)}"
