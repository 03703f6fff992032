"""
Article API Cloud Function

Path-style twin of article-preview, mounted behind the site's rewrite
rule so shared links can point at the site domain:

    GET /api/article/<uuid-or-slug>

Behaviour is identical to article-preview; both delegate to
preview_core.resolve_preview().
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
ROUTE_PREFIX = '/api/article/'

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


def extract_article_id(request) -> str:
    """Take the id from the last path segment, falling back to ?id=."""
    path = (request.path or '').rstrip('/')
    if path.startswith(ROUTE_PREFIX):
        candidate = path[len(ROUTE_PREFIX):]
        # Only a single segment is a valid id
        if candidate and '/' not in candidate:
            return candidate
    return request.args.get('id')


@functions_framework.http
def article_api(request):
    """Main Cloud Function entry point."""
    # Handle CORS
    if request.method == 'OPTIONS':
        return ('', 204, CORS_PREFLIGHT_HEADERS)

    try:
        identifier = extract_article_id(request)
        user_agent = request.headers.get('User-Agent')

        body, status, headers = resolve_preview(
            identifier, user_agent, get_store().fetch_article, CONFIG
        )
        return (body, status, {**headers, **CORS_HEADERS})

    except Exception as e:
        print(f"Error: {str(e)}\n{traceback.format_exc()}")
        return (render_error_html(CONFIG), 500, {'Content-Type': HTML_CONTENT_TYPE, **CORS_HEADERS})
