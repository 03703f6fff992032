"""
Sitemap Cloud Function

Builds sitemap.xml from the published articles.

Does NOT:
- Cache the result (the CDN in front of it does)
- Ping search engines
"""

import functions_framework
import os
import sys
import json
import traceback
from datetime import datetime, timezone

# Add shared module to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from preview_core.article_store import ArticleLookupError, ArticleStore
from preview_core.config import SiteConfig
from preview_core.sitemap import build_sitemap

# Configuration
CONFIG = SiteConfig.from_env()

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'authorization, x-client-info, apikey, content-type',
}


def get_store() -> ArticleStore:
    """Article store for the configured backend."""
    return ArticleStore(CONFIG.supabase_url, CONFIG.supabase_anon_key)


@functions_framework.http
def generate_sitemap(request):
    """Main Cloud Function entry point."""
    if request.method == 'OPTIONS':
        return ('', 204, CORS_HEADERS)

    json_headers = {**CORS_HEADERS, 'Content-Type': 'application/json'}

    try:
        now = datetime.now(timezone.utc).isoformat()
        articles = get_store().list_published_articles(now)
        xml = build_sitemap(articles, CONFIG, now)

        return (xml, 200, {**CORS_HEADERS, 'Content-Type': 'application/xml'})

    except ArticleLookupError as e:
        print(f"Error fetching articles for sitemap: {e}")
        return (json.dumps({
            'error': {
                'stage': 'sitemap',
                'message': str(e),
                'recoverable': True
            }
        }), 500, json_headers)

    except Exception as e:
        print(f"Error generating sitemap: {str(e)}\n{traceback.format_exc()}")
        return (json.dumps({
            'error': {
                'stage': 'processing',
                'message': 'Sitemap generation failed',
                'recoverable': False
            }
        }), 500, json_headers)
