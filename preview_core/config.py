"""
Site configuration for the preview functions.

Everything that used to be hard-coded (domain, branding, backend
credentials) is read from environment variables set on the Cloud Function.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_DOMAIN = 'luukumag.com'
DEFAULT_SITE_NAME = 'LUUKU MAG'
DEFAULT_TWITTER_HANDLE = '@luukumag'
DEFAULT_FB_APP_ID = '1234567890'  # Placeholder until a real app is registered
DEFAULT_FALLBACK_LOGO_PATH = '/lovable-uploads/logo.png'


@dataclass(frozen=True)
class SiteConfig:
    domain: str = DEFAULT_DOMAIN
    site_name: str = DEFAULT_SITE_NAME
    twitter_handle: str = DEFAULT_TWITTER_HANDLE
    fb_app_id: str = DEFAULT_FB_APP_ID
    fallback_logo_path: str = DEFAULT_FALLBACK_LOGO_PATH
    editorial_author: Optional[str] = None
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None

    @property
    def origin(self) -> str:
        """Canonical public origin, always on the www subdomain."""
        return f"https://www.{self.domain}"

    @property
    def fallback_logo_url(self) -> str:
        path = self.fallback_logo_path
        if not path.startswith('/'):
            path = '/' + path
        return f"{self.origin}{path}"

    @property
    def author_fallback(self) -> str:
        return self.editorial_author or f"{self.site_name} Editorial Team"

    @classmethod
    def from_env(cls, environ=None) -> 'SiteConfig':
        """Build config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        return cls(
            domain=env.get('SITE_DOMAIN', DEFAULT_DOMAIN),
            site_name=env.get('SITE_NAME', DEFAULT_SITE_NAME),
            twitter_handle=env.get('TWITTER_HANDLE', DEFAULT_TWITTER_HANDLE),
            fb_app_id=env.get('FB_APP_ID', DEFAULT_FB_APP_ID),
            fallback_logo_path=env.get('FALLBACK_LOGO_PATH', DEFAULT_FALLBACK_LOGO_PATH),
            editorial_author=env.get('EDITORIAL_AUTHOR'),
            supabase_url=env.get('SUPABASE_URL'),
            supabase_anon_key=env.get('SUPABASE_ANON_KEY'),
        )
