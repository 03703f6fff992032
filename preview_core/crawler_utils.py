"""
Request classification utilities.

Social platforms fetch a shared link once to build a preview card and never
run JavaScript, so they need a server-rendered page with Open Graph tags.
Everyone else gets redirected straight to the single-page app.

The bot list is a plain substring allowlist: any user-agent containing
"bot" counts as a crawler, and crawlers not listed here are served the
redirect.
"""

import re

# Substrings of known link-unfurling user agents (matched lower-cased)
BOT_PATTERNS = (
    'facebookexternalhit', 'facebot', 'facebook',
    'twitterbot', 'twitter',
    'linkedinbot', 'linkedin',
    'whatsapp', 'whatsappbot',
    'telegrambot', 'telegram',
    'slackbot', 'slack',
    'discordbot', 'discord',
    'pinterest', 'pinterestbot',
    'bot', 'crawler', 'spider',
)

# Canonical 8-4-4-4-12 UUID with version (1-5) and variant (8,9,a,b) nibbles
UUID_PATTERN = re.compile(
    r'^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$',
    re.IGNORECASE,
)


def is_crawler(user_agent: str) -> bool:
    """
    Check if a user-agent belongs to a link-unfurling crawler.

    Examples:
        >>> is_crawler("Mozilla/5.0 (compatible; facebookexternalhit/1.1)")
        True

        >>> is_crawler("Mozilla/5.0 (Windows NT 10.0)")
        False
    """
    ua = (user_agent or '').lower()
    return any(pattern in ua for pattern in BOT_PATTERNS)


def is_uuid(identifier: str) -> bool:
    """Check if an article identifier is a UUID (otherwise it is a slug)."""
    if not identifier:
        return False
    return UUID_PATTERN.match(identifier) is not None


def lookup_field(identifier: str) -> str:
    """Return the article column an identifier should be matched against."""
    return 'id' if is_uuid(identifier) else 'slug'
