"""Shared fixtures: canned sponsorship pages and a fake GraphQL transport."""

import os

import pytest
from dotenv import load_dotenv

load_dotenv()


class FakeGraphQLClient:
    """Serves canned pages of sponsorship edges, keyed by cursor."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def execute(self, query, variables=None):
        self.calls.append(dict(variables or {}))
        after = (variables or {}).get("after")
        index = 0 if after is None else int(after.split("-")[1]) + 1
        edges = self.pages[index]
        return {
            "viewer": {
                "sponsorshipsAsMaintainer": {
                    "pageInfo": {
                        "hasNextPage": index < len(self.pages) - 1,
                        "endCursor": f"cursor-{index}",
                    },
                    "edges": edges,
                }
            }
        }


def build_edge(login, privacy_level="PUBLIC", user_email=None, org_email=None,
               typename="User", price=500):
    entity = None
    if login is not None:
        entity = {"__typename": typename, "login": login}
        if user_email is not None:
            entity["userEmail"] = user_email
        if org_email is not None:
            entity["orgEmail"] = org_email

    return {
        "cursor": f"edge-{login}",
        "node": {
            "id": f"S_{login}",
            "createdAt": "2020-05-01T10:00:00Z",
            "privacyLevel": privacy_level,
            "tier": {
                "id": "T_kwHOAB",
                "name": "$5 a month",
                "createdAt": "2019-11-12T08:30:00Z",
                "description": "Thanks for the support!",
                "monthlyPriceInCents": price,
            },
            "sponsorEntity": entity,
        },
    }


@pytest.fixture
def edge():
    """Factory for sponsorship edges."""
    return build_edge


@pytest.fixture
def fake_client():
    """Factory for a fake transport over the given pages."""
    return FakeGraphQLClient


@pytest.fixture
def gh_token():
    token = os.environ.get("GH_TOKEN")
    if not token:
        pytest.skip("GH_TOKEN not set")
    return token
