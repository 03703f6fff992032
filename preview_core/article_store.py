"""
Read-only access to the articles table through the hosted REST API.

The CMS owns the table; these functions only ever issue GET requests
against {SUPABASE_URL}/rest/v1/articles using the anon key.
"""

from typing import List, Optional

import requests

ARTICLES_PATH = '/rest/v1/articles'
LOOKUP_FIELDS = ('id', 'slug')
SITEMAP_COLUMNS = 'id,slug,updated_at,published_at,category'


class ArticleLookupError(Exception):
    """The article table could not be queried (network, HTTP or payload error)."""


class ArticleStore:
    """Thin client for the articles table."""

    def __init__(self, base_url: Optional[str], api_key: Optional[str], timeout: int = 10):
        self.base_url = (base_url or '').rstrip('/')
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self) -> dict:
        return {
            'apikey': self.api_key,
            'Authorization': f'Bearer {self.api_key}',
            'Accept': 'application/json',
        }

    def _get_rows(self, params: dict) -> list:
        if not self.base_url or not self.api_key:
            raise ArticleLookupError('SUPABASE_URL / SUPABASE_ANON_KEY not configured')

        try:
            response = requests.get(
                f'{self.base_url}{ARTICLES_PATH}',
                headers=self._headers(),
                params=params,
                timeout=self.timeout
            )
            response.raise_for_status()
            rows = response.json()
        except requests.exceptions.Timeout:
            raise ArticleLookupError('Request timed out')
        except requests.exceptions.HTTPError as e:
            raise ArticleLookupError(f'HTTP error: {e.response.status_code}')
        except requests.exceptions.RequestException as e:
            raise ArticleLookupError(f'Request failed: {str(e)}')
        except ValueError as e:
            raise ArticleLookupError(f'Invalid JSON response: {str(e)}')

        if not isinstance(rows, list):
            raise ArticleLookupError(f'Unexpected response payload: {type(rows).__name__}')

        return rows

    def fetch_article(self, field: str, value: str) -> Optional[dict]:
        """
        Fetch a single article by exact match on id or slug.

        Returns the first matching row, or None if nothing matches.
        Raises ArticleLookupError if the query itself fails.
        """
        if field not in LOOKUP_FIELDS:
            raise ValueError(f'Unsupported lookup field: {field}')

        rows = self._get_rows({
            'select': '*',
            field: f'eq.{value}',
            'limit': 1,
        })
        return rows[0] if rows else None

    def list_published_articles(self, now: str) -> List[dict]:
        """Articles published at or before `now` (ISO timestamp), newest first."""
        return self._get_rows({
            'select': SITEMAP_COLUMNS,
            'published_at': f'lte.{now}',
            'order': 'published_at.desc',
        })
