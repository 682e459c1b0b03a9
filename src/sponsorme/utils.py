"""Utility functions for decoding sponsorship pages."""

from typing import Any, Dict, List, Optional, Tuple, TypeVar

from .models import Sponsor, Sponsorship, Tier

T = TypeVar("T")

PUBLIC_PRIVACY_LEVEL = "PUBLIC"


class MalformedResponseError(ValueError):
    """Raised when a response does not have the shape the query asks for."""


def withdefault(fallback: T, value: Optional[T]) -> T:
    """Return fallback if value is None."""
    if value is None:
        return fallback
    return value


def _require(obj: Dict[str, Any], key: str, where: str) -> Any:
    if not isinstance(obj, dict):
        raise MalformedResponseError(f"Expected an object for {where}, got {type(obj).__name__}")
    if key not in obj or obj[key] is None:
        raise MalformedResponseError(f"Missing '{key}' in {where}")
    return obj[key]


def extract_page(
    data: Dict[str, Any]
) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
    """
    Pull pagination info and edges out of a sponsorships response.

    Args:
        data: GraphQL response data

    Returns:
        Tuple of (pageInfo dict, list of edges)

    Raises:
        MalformedResponseError: If the connection or its pageInfo is missing,
            or more pages are announced without a cursor to reach them
    """
    viewer = _require(data, 'viewer', 'response')
    connection = _require(viewer, 'sponsorshipsAsMaintainer', 'viewer')
    page_info = _require(connection, 'pageInfo', 'sponsorshipsAsMaintainer')
    has_next_page = _require(page_info, 'hasNextPage', 'pageInfo')

    # Without a cursor the next request would start over at the first page
    if has_next_page and not page_info.get('endCursor'):
        raise MalformedResponseError("pageInfo has a next page but no 'endCursor'")

    edges = connection.get('edges') or []
    if not isinstance(edges, list):
        raise MalformedResponseError(f"Expected a list of edges, got {type(edges).__name__}")
    return page_info, edges


def extract_sponsorship(edge: Optional[Dict[str, Any]]) -> Optional[Sponsorship]:
    """
    Convert a sponsorship edge into a Sponsorship.

    Args:
        edge: Edge from the sponsorshipsAsMaintainer connection

    Returns:
        Sponsorship, or None when the edge is null or the sponsor account
        is gone (no login)

    Raises:
        MalformedResponseError: If the node or its tier is incomplete
    """
    # Connection edges are nullable in the GitHub schema
    if edge is None:
        return None

    node = _require(edge, 'node', 'edge')
    if not isinstance(node, dict):
        raise MalformedResponseError(f"Expected an object for sponsorship node, got {type(node).__name__}")

    entity = node.get('sponsorEntity') or {}
    if not isinstance(entity, dict):
        raise MalformedResponseError(f"Expected an object for sponsorEntity, got {type(entity).__name__}")
    login = entity.get('login')
    if not login:
        return None

    tier = _require(node, 'tier', 'sponsorship node')

    return Sponsorship(
        id=_require(node, 'id', 'sponsorship node'),
        created_at=_require(node, 'createdAt', 'sponsorship node'),
        public=node.get('privacyLevel') == PUBLIC_PRIVACY_LEVEL,
        sponsor=Sponsor(
            login=login,
            email=entity.get('orgEmail') or entity.get('userEmail') or None,
        ),
        tier=Tier(
            id=_require(tier, 'id', 'tier'),
            created_at=_require(tier, 'createdAt', 'tier'),
            name=_require(tier, 'name', 'tier'),
            description=tier.get('description'),
            monthly_price_in_cents=int(_require(tier, 'monthlyPriceInCents', 'tier')),
        ),
    )
