"""
HTML documents served by the preview functions.

All values passed into render_article_html() must already be escaped.
"""

from typing import Dict

from .config import SiteConfig
from .text_utils import escape_html


def render_redirect_html(path: str) -> str:
    """Minimal page that sends a human visitor straight to the SPA route."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta http-equiv="refresh" content="0;url={path}">
  <title>Redirecting...</title>
</head>
<body>
  <p>Redirecting to article... <a href="{path}">Click here if not redirected</a></p>
  <script>window.location.replace('{path}');</script>
</body>
</html>"""


def render_article_html(data: Dict[str, str], config: SiteConfig) -> str:
    """
    Crawler-facing document with Open Graph and Twitter Card tags.

    Expected keys in data (all escaped): title, description, url, image,
    image_type, author, published_at, updated_at, category.
    """
    site_name = escape_html(config.site_name)
    handle = escape_html(config.twitter_handle)
    app_id = escape_html(config.fb_app_id)

    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{data['title']} - {site_name}</title>
    <meta name="description" content="{data['description']}" />
    <link rel="canonical" href="{data['url']}" />

    <!-- Open Graph -->
    <meta property="fb:app_id" content="{app_id}" />
    <meta property="og:title" content="{data['title']}" />
    <meta property="og:description" content="{data['description']}" />
    <meta property="og:type" content="article" />
    <meta property="og:url" content="{data['url']}" />
    <meta property="og:image" content="{data['image']}" />
    <meta property="og:image:secure_url" content="{data['image']}" />
    <meta property="og:image:type" content="{data['image_type']}" />
    <meta property="og:image:width" content="1200" />
    <meta property="og:image:height" content="630" />
    <meta property="og:image:alt" content="{data['title']}" />
    <meta property="og:site_name" content="{site_name}" />
    <meta property="og:locale" content="en_US" />

    <!-- Article metadata -->
    <meta property="article:published_time" content="{data['published_at']}" />
    <meta property="article:modified_time" content="{data['updated_at']}" />
    <meta property="article:section" content="{data['category']}" />
    <meta property="article:author" content="{data['author']}" />

    <!-- Twitter Card -->
    <meta name="twitter:card" content="summary_large_image" />
    <meta name="twitter:site" content="{handle}" />
    <meta name="twitter:creator" content="{handle}" />
    <meta name="twitter:title" content="{data['title']}" />
    <meta name="twitter:description" content="{data['description']}" />
    <meta name="twitter:image" content="{data['image']}" />
    <meta name="twitter:image:alt" content="{data['title']}" />

    <!-- Send anything that follows redirects to the live article -->
    <meta http-equiv="refresh" content="0;url={data['url']}" />
    <script>window.location.href="{data['url']}";</script>
  </head>
  <body>
    <h1>{data['title']}</h1>
    <p>Redirecting to article...</p>
    <a href="{data['url']}">Click here if not redirected</a>
  </body>
</html>"""


def render_not_found_html(config: SiteConfig) -> str:
    site_name = escape_html(config.site_name)
    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <title>Article Not Found - {site_name}</title>
  </head>
  <body>
    <h1>Article Not Found</h1>
    <p>The article you're looking for doesn't exist.</p>
    <a href="{config.origin}/">Return to Homepage</a>
  </body>
</html>"""


def render_error_html(config: SiteConfig) -> str:
    site_name = escape_html(config.site_name)
    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <title>Error - {site_name}</title>
  </head>
  <body>
    <h1>Something Went Wrong</h1>
    <p>We're having trouble loading this article.</p>
    <a href="{config.origin}/">Return to Homepage</a>
  </body>
</html>"""
