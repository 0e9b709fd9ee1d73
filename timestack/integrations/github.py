import logging
from typing import Any, Dict, Optional

import requests

from timestack.config import Settings
from timestack.exceptions import GithubClientNotInitialized

logger = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"


class GithubGraphqlService:
    """GitHub GraphQL API access.

    Without ``GITHUB_PERSONAL_TOKEN`` the application still starts; only
    ``get_client`` and ``query`` fail.
    """

    def __init__(self, config: Settings, timeout: int = 30):
        self.token = config.github_personal_token
        self.timeout = timeout
        self._client: Optional[requests.Session] = None

    def start(self) -> None:
        if not self.token or not self.token.strip():
            logger.info("GITHUB_PERSONAL_TOKEN not set, GitHub integration disabled")
            return

        session = requests.Session()
        session.headers.update({
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
        })
        self._client = session

    def get_client(self) -> requests.Session:
        if self._client is None:
            raise GithubClientNotInitialized("github graphql client not initialized")
        return self._client

    def query(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        response = self.get_client().post(
            GITHUB_GRAPHQL_URL,
            json={"query": query, "variables": variables or {}},
            timeout=self.timeout,
        )
        response.raise_for_status()
        payload = response.json()
        if payload.get("errors"):
            raise requests.HTTPError(f"GitHub GraphQL errors: {payload['errors']}", response=response)
        return payload["data"]

    def stop(self) -> None:
        client, self._client = self._client, None
        if client is not None:
            client.close()
