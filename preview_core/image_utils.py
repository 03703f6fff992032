"""
Image URL normalization for social preview cards.

Stored article images come in several shapes: missing, root-relative paths
from the CMS uploader, absolute URLs on the bare domain, and absolute URLs
on object storage. Crawlers get one absolute URL, and images on the bare
domain are moved onto www.
"""

from typing import Optional
from urllib.parse import urlparse, urlunparse

from .config import SiteConfig

PNG_MIME_TYPE = 'image/png'
DEFAULT_MIME_TYPE = 'image/jpeg'


def normalize_image_url(image_url: Optional[str], config: SiteConfig) -> str:
    """
    Derive the absolute preview image URL for an article.

    Rules, in order:
    1. Missing or blank -> site fallback logo
    2. Not starting with "http" -> root-relative on the canonical origin
    3. Absolute on the bare site domain -> same URL on www
    4. Anything else -> unchanged

    Applying this to its own output returns the same value.

    Examples:
        >>> cfg = SiteConfig(domain='luukumag.com')
        >>> normalize_image_url('foo.jpg', cfg)
        'https://www.luukumag.com/foo.jpg'

        >>> normalize_image_url('https://luukumag.com/x.png', cfg)
        'https://www.luukumag.com/x.png'
    """
    if image_url is None or not image_url.strip():
        return config.fallback_logo_url

    image_url = image_url.strip()

    if not image_url.startswith('http'):
        separator = '' if image_url.startswith('/') else '/'
        return f"{config.origin}{separator}{image_url}"

    parsed = urlparse(image_url)
    if parsed.hostname != config.domain.lower():
        return image_url

    # Only the host changes; userinfo, port, path and query are kept as-is
    userinfo, at, hostport = parsed.netloc.rpartition('@')
    return urlunparse(parsed._replace(netloc=f"{userinfo}{at}www.{hostport}"))


def image_mime_type(image_url: str) -> str:
    """Map an image URL to image/png or image/jpeg based on its path extension."""
    if not image_url:
        return DEFAULT_MIME_TYPE

    path = urlparse(image_url).path
    extension = path.rsplit('.', 1)[-1].lower() if '.' in path else ''
    return PNG_MIME_TYPE if extension == 'png' else DEFAULT_MIME_TYPE
