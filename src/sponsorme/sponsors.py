"""Sponsor lookups against the viewer's GitHub Sponsors listing."""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .client import GitHubGraphQLClient
from .models import Sponsorship
from .queries import DEFAULT_PAGE_SIZE, SPONSORSHIPS_QUERY
from .utils import extract_page, extract_sponsorship, withdefault

logger = logging.getLogger(__name__)


@dataclass
class PaginationState:
    """Where the sponsorship listing was left off, plus everything seen so far."""

    cursor: Optional[str] = None
    has_next_page: bool = True
    cache: Dict[str, Sponsorship] = field(default_factory=dict)

    def reset(self) -> None:
        self.cursor = None
        self.has_next_page = True
        self.cache = {}


class Sponsors:
    """
    Tells whether an account sponsors the authenticated viewer.

    Sponsorships are fetched page by page and cached by login. The page
    position is shared across lookups, so looking up a different login
    resumes where the previous lookup stopped instead of starting over.

    Example:
        sponsors = Sponsors(token="ghp_...")
        sponsors.get_info("maticzav")
    """

    def __init__(
        self,
        token: Optional[str] = None,
        cache: Optional[bool] = True,
        page_size: int = DEFAULT_PAGE_SIZE,
        client: Optional[Any] = None
    ):
        """
        Initialize the lookup client.

        Args:
            token: GitHub token of the maintainer whose sponsors are checked
            cache: Answer repeated lookups from the local cache
            page_size: Sponsorships requested per page
            client: Object with an execute(query, variables) method, used
                instead of a GitHubGraphQLClient built from the token
        """
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")

        if client is None:
            if not token:
                raise ValueError("Either a GitHub token or a client is required")
            client = GitHubGraphQLClient(token)
            self._owns_client = True
        else:
            self._owns_client = False

        self.client = client
        self.use_cache = withdefault(True, cache)
        self.page_size = page_size

        self._state = PaginationState()
        self._lock = threading.Lock()

    def __enter__(self) -> "Sponsors":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def cached(self) -> Dict[str, Sponsorship]:
        """Copy of the sponsorships seen so far, keyed by login."""
        return dict(self._state.cache)

    def get_info(self, login: str) -> Optional[Sponsorship]:
        """
        Return the sponsorship of the given login, if it exists.

        Args:
            login: GitHub login handle of the possible sponsor

        Returns:
            Sponsorship or None if the login does not sponsor the viewer

        Raises:
            requests.exceptions.RequestException: On network errors
            ValueError: On GraphQL errors or malformed responses
        """
        return self._find(login)

    def is_sponsor(self, login: str) -> bool:
        """Tell whether the given login sponsors the viewer."""
        return self._find(login) is not None

    def flush(self) -> None:
        """Clear the cache and restart pagination from the first page."""
        with self._lock:
            self._state.reset()
        logger.debug("Sponsorship cache flushed")

    def close(self) -> None:
        """Close the GraphQL client if this instance created it."""
        if self._owns_client:
            self.client.close()

    def _find(self, login: str) -> Optional[Sponsorship]:
        with self._lock:
            state = self._state

            if self.use_cache and login in state.cache:
                logger.debug("Cache hit for %s", login)
                return state.cache[login]

            while state.has_next_page:
                variables = {
                    "first": self.page_size,
                    "after": state.cursor,
                }
                logger.debug("Fetching sponsorships after cursor %s", state.cursor)
                data = self.client.execute(SPONSORSHIPS_QUERY, variables)

                page_info, edges = extract_page(data)
                sponsorships = [extract_sponsorship(edge) for edge in edges]

                # Resume after this page on the next lookup, match or not
                state.has_next_page = bool(page_info['hasNextPage'])
                state.cursor = page_info.get('endCursor')

                found = None
                for sponsorship in sponsorships:
                    if sponsorship is None:
                        logger.debug("Skipping sponsorship without a sponsor login")
                        continue
                    state.cache[sponsorship.sponsor.login] = sponsorship
                    if found is None and sponsorship.sponsor.login == login:
                        found = sponsorship

                logger.debug(
                    "Fetched %d sponsorships (more pages: %s)",
                    len(edges), state.has_next_page
                )

                if found is not None:
                    return found

            logger.debug("No sponsorship found for %s", login)
            return None
