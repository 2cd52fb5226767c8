from fastapi import Request

from app.services.prober_service import ConnectivityProber
from app.services.language import LanguagePreferenceStore


def get_prober(request: Request) -> ConnectivityProber:
    """The prober built at startup from the explicit store configs."""
    return request.app.state.prober


def get_language_store(request: Request) -> LanguagePreferenceStore:
    # work on a copy; writes reach the browser through Set-Cookie
    return LanguagePreferenceStore(dict(request.cookies))
