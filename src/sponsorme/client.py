"""GitHub GraphQL API client with token authentication."""

from typing import Any, Dict, Optional

import requests


class GitHubGraphQLClient:
    """Client for the GitHub GraphQL API."""

    API_URL = "https://api.github.com/graphql"

    def __init__(self, token: str, api_url: Optional[str] = None):
        """
        Initialize the GitHub GraphQL client.

        Args:
            token: GitHub Personal Access Token
            api_url: Optional endpoint override (GitHub Enterprise)
        """
        if not token:
            raise ValueError("GitHub token is required")

        self.token = token
        self.api_url = api_url or self.API_URL
        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        })

    def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            GraphQL response data

        Raises:
            requests.exceptions.RequestException: On network errors
            ValueError: On GraphQL errors
        """
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = self.session.post(self.api_url, json=payload)
        response.raise_for_status()

        result = response.json()

        # Check for GraphQL errors
        if 'errors' in result:
            error_messages = [e.get('message', str(e)) for e in result['errors']]
            raise ValueError(f"GraphQL errors: {'; '.join(error_messages)}")

        return result.get('data') or {}

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
