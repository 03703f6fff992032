"""
Social preview resolver.

Shared by every HTTP entry point. Given an article identifier and the
caller's user-agent it decides what to serve:

- human browser      -> 200 redirect stub (no database call)
- crawler, found     -> 200 document with Open Graph / Twitter Card tags
- crawler, not found -> 404 page (also used when the lookup itself fails)
- crawler, crash     -> 500 page

Nothing here raises; every outcome is a PreviewResponse.
"""

import traceback
from typing import Callable, NamedTuple, Optional
from urllib.parse import quote

from .article_store import ArticleLookupError
from .config import SiteConfig
from .crawler_utils import is_crawler, lookup_field
from .image_utils import image_mime_type, normalize_image_url
from .templates import (
    render_article_html,
    render_error_html,
    render_not_found_html,
    render_redirect_html,
)
from .text_utils import build_description, escape_html

HTML_CONTENT_TYPE = 'text/html; charset=utf-8'
TEXT_CONTENT_TYPE = 'text/plain; charset=utf-8'
CRAWLER_CACHE_CONTROL = 's-maxage=3600, stale-while-revalidate=86400'

# (field, value) -> article row or None
ArticleLookup = Callable[[str, str], Optional[dict]]


class PreviewResponse(NamedTuple):
    """Same (body, status, headers) shape Cloud Functions accept as a return value."""
    body: str
    status: int
    headers: dict


def _html(body: str, status: int, **extra_headers) -> PreviewResponse:
    headers = {'Content-Type': HTML_CONTENT_TYPE}
    headers.update(extra_headers)
    return PreviewResponse(body, status, headers)


def article_path(identifier: str) -> str:
    """SPA route for an article, with the identifier percent-encoded."""
    return f"/articles/{quote(identifier, safe='')}"


def canonical_url(article: dict, config: SiteConfig) -> str:
    """Public URL of an article, preferring the slug over the id."""
    key = article.get('slug') or article.get('id')
    return f"{config.origin}{article_path(str(key))}"


def build_preview_metadata(article: dict, config: SiteConfig) -> dict:
    """Derive the escaped values the crawler template needs from an article row."""
    title = article['title']
    image = normalize_image_url(article.get('image_url'), config)

    return {
        'title': escape_html(title),
        'description': escape_html(build_description(article.get('excerpt'), title)),
        'url': escape_html(canonical_url(article, config)),
        'image': escape_html(image),
        'image_type': image_mime_type(image),
        'author': escape_html(article.get('author') or config.author_fallback),
        'published_at': escape_html(article.get('published_at')),
        'updated_at': escape_html(article.get('updated_at')),
        'category': escape_html(article.get('category')),
    }


def resolve_preview(identifier: Optional[str], user_agent: Optional[str],
                    lookup: ArticleLookup, config: SiteConfig) -> PreviewResponse:
    """
    Produce the response for a preview request.

    Args:
        identifier: Article UUID or slug from the request
        user_agent: Raw User-Agent header, may be None
        lookup: Callable taking (field, value) and returning the article row
            or None. May raise ArticleLookupError.
        config: Site configuration (domain, branding)

    Returns:
        PreviewResponse (body, status, headers)
    """
    if not identifier:
        return PreviewResponse('Article ID required', 400, {'Content-Type': TEXT_CONTENT_TYPE})

    user_agent = user_agent or ''
    crawler = is_crawler(user_agent)

    print(f"Request from: {user_agent[:100] or 'unknown'}")
    print(f"Is Crawler: {crawler}")

    if not crawler:
        return _html(render_redirect_html(article_path(identifier)), 200)

    try:
        field = lookup_field(identifier)
        print(f"Looking up article by {field}: {identifier}")

        try:
            article = lookup(field, identifier)
        except ArticleLookupError as e:
            print(f"Article fetch error: {e}")
            return _html(render_not_found_html(config), 404)

        if not article:
            print(f"Article not found: {identifier}")
            return _html(render_not_found_html(config), 404)

        metadata = build_preview_metadata(article, config)
        print(f"Article URL: {metadata['url']}")
        print(f"Article image from DB: {article.get('image_url')}")
        print(f"Final article image: {metadata['image']}")

        return _html(
            render_article_html(metadata, config),
            200,
            **{'Cache-Control': CRAWLER_CACHE_CONTROL}
        )

    except Exception as e:
        print(f"Error rendering preview: {str(e)}\n{traceback.format_exc()}")
        return _html(render_error_html(config), 500)
