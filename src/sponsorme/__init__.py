"""Lightweight client that checks who sponsors you on GitHub."""

from .client import GitHubGraphQLClient
from .models import Sponsor, Sponsorship, Tier
from .sponsors import Sponsors
from .utils import MalformedResponseError

__version__ = "1.0.0"
__all__ = [
    "GitHubGraphQLClient",
    "MalformedResponseError",
    "Sponsor",
    "Sponsors",
    "Sponsorship",
    "Tier",
]
