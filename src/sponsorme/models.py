"""Sponsorship records returned by lookups."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Sponsor:
    """Account backing a sponsorship."""

    login: str
    email: Optional[str] = None


@dataclass(frozen=True)
class Tier:
    """Priced support level a sponsor subscribes to."""

    id: str
    created_at: str
    name: str
    description: Optional[str]
    # Amount the maintainer receives each month
    monthly_price_in_cents: int


@dataclass(frozen=True)
class Sponsorship:
    """A sponsor's subscription to one of the viewer's tiers."""

    id: str
    created_at: str
    public: bool
    sponsor: Sponsor
    tier: Tier

    def to_dict(self) -> Dict[str, Any]:
        """Return the record in the API's camelCase shape."""
        return {
            'id': self.id,
            'createdAt': self.created_at,
            'public': self.public,
            'sponsor': {
                'login': self.sponsor.login,
                'email': self.sponsor.email,
            },
            'tier': {
                'id': self.tier.id,
                'createdAt': self.tier.created_at,
                'name': self.tier.name,
                'description': self.tier.description,
                'monthlyPriceInCents': self.tier.monthly_price_in_cents,
            },
        }
