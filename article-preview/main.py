"""
Article Preview Cloud Function

Serves social preview cards for shared article links.

    GET /?id=<uuid-or-slug>

Responsibilities:
- Detect link-unfurling crawlers from the User-Agent
- Redirect humans to the article page without touching the database
- Render Open Graph / Twitter Card metadata for crawlers

Does NOT:
- Write to the articles table (CMS's job)
- Retry failed lookups (caller can simply re-request)
"""

import functions_framework
import os
import sys
import traceback

# Add shared module to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from preview_core.article_store import ArticleStore
from preview_core.config import SiteConfig
from preview_core.resolver import HTML_CONTENT_TYPE, resolve_preview
from preview_core.templates import render_error_html

# Configuration
CONFIG = SiteConfig.from_env()

CORS_HEADERS = {'Access-Control-Allow-Origin': '*'}
CORS_PREFLIGHT_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET, OPTIONS',
    'Access-Control-Allow-Headers': 'authorization, x-client-info, apikey, content-type',
    'Access-Control-Max-Age': '3600'
}


def get_store() -> ArticleStore:
    """Article store for the configured backend."""
    return ArticleStore(CONFIG.supabase_url, CONFIG.supabase_anon_key)


@functions_framework.http
def article_preview(request):
    """
    Main Cloud Function entry point.

    Query parameters:
        id: Article UUID or slug (required)
    """
    # Handle CORS
    if request.method == 'OPTIONS':
        return ('', 204, CORS_PREFLIGHT_HEADERS)

    try:
        identifier = request.args.get('id')
        user_agent = request.headers.get('User-Agent')

        body, status, headers = resolve_preview(
            identifier, user_agent, get_store().fetch_article, CONFIG
        )
        return (body, status, {**headers, **CORS_HEADERS})

    except Exception as e:
        print(f"Error: {str(e)}\n{traceback.format_exc()}")
        return (render_error_html(CONFIG), 500, {'Content-Type': HTML_CONTENT_TYPE, **CORS_HEADERS})
