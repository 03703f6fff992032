"""
Text processing utilities for preview metadata.

Every value that ends up inside an HTML attribute or text node goes through
escape_html() first. Excerpts come from the rich text editor and can carry
markup, so they are stripped before being used as a description.
"""

import html
import re
from typing import Optional

# Social platforms cut descriptions around this length anyway
MAX_DESCRIPTION_LENGTH = 160

_TAG_RE = re.compile(r'<[^>]*>')


def escape_html(text: Optional[str]) -> str:
    """
    Escape the five HTML-significant characters.

    Examples:
        >>> escape_html('Hello <World>')
        'Hello &lt;World&gt;'

        >>> escape_html("Tom's \\"Cafe\\" & Bar")
        'Tom&#x27;s &quot;Cafe&quot; &amp; Bar'
    """
    if text is None:
        return ''

    return html.escape(str(text), quote=True)


def strip_tags(text: Optional[str]) -> str:
    """Remove anything that looks like an HTML tag."""
    if not text:
        return ''
    return _TAG_RE.sub('', text)


def build_description(excerpt: Optional[str], title: str,
                      max_length: int = MAX_DESCRIPTION_LENGTH) -> str:
    """
    Plain-text description for meta tags (not yet escaped).

    Uses the excerpt without markup, cut to max_length characters. Falls
    back to the title when there is no excerpt.
    """
    if not excerpt:
        return title
    return strip_tags(excerpt)[:max_length]
