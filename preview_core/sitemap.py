"""
XML sitemap for search engines.

Lists the home page, the article index, one page per category and every
published article at its canonical URL.
"""

from typing import Iterable, List, Optional
from xml.sax.saxutils import escape as xml_escape
from urllib.parse import quote

from .config import SiteConfig
from .resolver import canonical_url

# Section names as used by the CMS category picker
CATEGORIES = ['World', 'Politics', 'Finance', 'Technology', 'Youth', 'Sports', 'Culture']

SITEMAP_NAMESPACE = 'http://www.sitemaps.org/schemas/sitemap/0.9'


def _url_entry(loc: str, lastmod: Optional[str], changefreq: str, priority: str) -> str:
    # An empty <lastmod> is not a valid W3C datetime, so leave it out
    lastmod_line = f"    <lastmod>{xml_escape(lastmod)}</lastmod>\n" if lastmod else ""
    return (
        "  <url>\n"
        f"    <loc>{xml_escape(loc)}</loc>\n"
        f"{lastmod_line}"
        f"    <changefreq>{changefreq}</changefreq>\n"
        f"    <priority>{priority}</priority>\n"
        "  </url>"
    )


def build_sitemap(articles: Iterable[dict], config: SiteConfig, now: str) -> str:
    """
    Render the sitemap XML.

    Args:
        articles: Rows with id, slug, updated_at, published_at
        config: Site configuration
        now: ISO timestamp used as lastmod for the static pages
    """
    entries: List[str] = [
        _url_entry(f"{config.origin}/", now, 'daily', '1.0'),
        _url_entry(f"{config.origin}/articles", now, 'daily', '0.9'),
    ]

    for category in CATEGORIES:
        entries.append(_url_entry(
            f"{config.origin}/articles?category={quote(category)}", now, 'daily', '0.8'
        ))

    for article in articles:
        lastmod = article.get('updated_at') or article.get('published_at')
        entries.append(_url_entry(canonical_url(article, config), lastmod, 'weekly', '0.7'))

    body = '\n'.join(entries)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n'
        f'{body}\n'
        '</urlset>'
    )
