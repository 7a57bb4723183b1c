"""
Adapters package for the CFTools client.

Contains the HTTP side of the client: the httpx transport, bearer token
acquisition and the mapping of raw payloads onto domain models. Keep
adapters thin and side-effect free outside of explicit calls.
"""

from .auth_provider import CFToolsAuthorizationProvider, LoginCredentials
from .http import CFToolsHttp
from .http_client import HttpCFToolsClient

__all__ = [
    "CFToolsAuthorizationProvider",
    "LoginCredentials",
    "CFToolsHttp",
    "HttpCFToolsClient",
]
