"""
Shared pytest fixtures for the article preview functions.
"""

import pytest
import sys
import importlib.util
from pathlib import Path

# Project root for finding Cloud Function modules
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from preview_core.config import SiteConfig

SUPABASE_URL = 'https://test-project.supabase.co'
SUPABASE_ANON_KEY = 'test-anon-key'
ARTICLES_ENDPOINT = f'{SUPABASE_URL}/rest/v1/articles'

SAMPLE_UUID = '3fa85f64-5717-4562-b3fc-2c963f66afa6'


def _load_module_from_path(module_name: str, file_path: Path):
    """Load a module from a specific file path."""
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


# Load Cloud Function modules with unique names at module load time
_article_preview_module = _load_module_from_path(
    'article_preview_main',
    PROJECT_ROOT / 'article-preview' / 'main.py'
)

_article_api_module = _load_module_from_path(
    'article_api_main',
    PROJECT_ROOT / 'article-api' / 'main.py'
)

_generate_sitemap_module = _load_module_from_path(
    'generate_sitemap_main',
    PROJECT_ROOT / 'generate-sitemap' / 'main.py'
)


# ============================================================================
# Configuration
# ============================================================================

@pytest.fixture
def site_config():
    """Site config pointing at a fake backend."""
    return SiteConfig(
        domain='luukumag.com',
        supabase_url=SUPABASE_URL,
        supabase_anon_key=SUPABASE_ANON_KEY,
    )


@pytest.fixture
def use_config(monkeypatch):
    """Swap the config used by every Cloud Function module."""
    def _use(config):
        for module in (_article_preview_module, _article_api_module, _generate_sitemap_module):
            monkeypatch.setattr(module, 'CONFIG', config)
    return _use


@pytest.fixture(autouse=True)
def function_config(use_config, site_config):
    """Every Cloud Function module uses the test config, regardless of env."""
    use_config(site_config)
    return site_config


@pytest.fixture
def articles_endpoint():
    """REST endpoint of the articles table on the fake backend."""
    return ARTICLES_ENDPOINT


# ============================================================================
# Sample data
# ============================================================================

@pytest.fixture
def sample_article():
    """A fully populated article row as returned by the REST API."""
    return {
        'id': SAMPLE_UUID,
        'slug': 'inside-the-kigali-jazz-scene',
        'title': 'Inside the Kigali Jazz Scene',
        'excerpt': '<p>A night out with the <strong>musicians</strong> reshaping the city.</p>',
        'content': '<p>Full body...</p>',
        'image_url': 'https://test-project.supabase.co/storage/v1/object/public/images/jazz.jpg',
        'author': 'Aline Uwase',
        'category': 'Culture',
        'published_at': '2025-03-01T08:00:00+00:00',
        'updated_at': '2025-03-02T10:30:00+00:00',
    }


@pytest.fixture
def minimal_article():
    """An article row with every optional field empty."""
    return {
        'id': SAMPLE_UUID,
        'slug': None,
        'title': 'Untitled draft',
        'excerpt': None,
        'image_url': None,
        'author': None,
        'category': 'World',
        'published_at': '2025-03-01T08:00:00+00:00',
        'updated_at': '2025-03-01T08:00:00+00:00',
    }


@pytest.fixture
def crawler_user_agent():
    return 'facebookexternalhit/1.1 (+http://www.facebook.com/externalhit_uatext.php)'


@pytest.fixture
def browser_user_agent():
    return ('Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
            '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36')


@pytest.fixture
def fake_lookup():
    """Factory for in-memory article lookups that record every call."""
    class FakeLookup:
        def __init__(self, article=None, error=None):
            self.article = article
            self.error = error
            self.calls = []

        def __call__(self, field, value):
            self.calls.append((field, value))
            if self.error is not None:
                raise self.error
            return self.article

    return FakeLookup


@pytest.fixture
def mock_flask_request():
    """Factory for creating mock Flask request objects."""
    class MockRequest:
        def __init__(self, args=None, headers=None, method='GET', path='/'):
            self.args = args or {}
            self.headers = headers or {}
            self.method = method
            self.path = path
            self.data = b''

    return MockRequest


# ============================================================================
# Cloud Function entry points
# ============================================================================

@pytest.fixture
def article_preview():
    """Returns main entry point from article-preview."""
    return _article_preview_module.article_preview


@pytest.fixture
def article_api():
    """Returns main entry point from article-api."""
    return _article_api_module.article_api


@pytest.fixture
def extract_article_id():
    """Returns extract_article_id function from article-api."""
    return _article_api_module.extract_article_id


@pytest.fixture
def generate_sitemap():
    """Returns main entry point from generate-sitemap."""
    return _generate_sitemap_module.generate_sitemap
