"""Shared preview logic for the LUUKU MAG social preview functions."""

from .config import SiteConfig

from .crawler_utils import (
    BOT_PATTERNS,
    UUID_PATTERN,
    is_crawler,
    is_uuid,
    lookup_field,
)

from .image_utils import (
    normalize_image_url,
    image_mime_type,
)

from .text_utils import (
    MAX_DESCRIPTION_LENGTH,
    escape_html,
    strip_tags,
    build_description,
)

from .article_store import (
    ArticleLookupError,
    ArticleStore,
)

from .resolver import (
    CRAWLER_CACHE_CONTROL,
    PreviewResponse,
    article_path,
    canonical_url,
    build_preview_metadata,
    resolve_preview,
)

from .sitemap import (
    CATEGORIES,
    build_sitemap,
)

__all__ = [
    # Configuration
    'SiteConfig',
    # Crawler detection
    'BOT_PATTERNS',
    'UUID_PATTERN',
    'is_crawler',
    'is_uuid',
    'lookup_field',
    # Image utilities
    'normalize_image_url',
    'image_mime_type',
    # Text utilities
    'MAX_DESCRIPTION_LENGTH',
    'escape_html',
    'strip_tags',
    'build_description',
    # Article store
    'ArticleLookupError',
    'ArticleStore',
    # Resolver
    'CRAWLER_CACHE_CONTROL',
    'PreviewResponse',
    'article_path',
    'canonical_url',
    'build_preview_metadata',
    'resolve_preview',
    # Sitemap
    'CATEGORIES',
    'build_sitemap',
]
