import logging
from typing import Optional

import requests

from projectetl.config import ClientSettings
from projectetl.extract._client import GraphQLClient
from projectetl.extract._raw import GraphQLResponse, QueryPayload
from projectetl.extract.errors import BadGatewayError, UpstreamError

logger = logging.getLogger(__name__)


class GitHubGraphQLClient(GraphQLClient):
    """Posts GraphQL payloads to the GitHub API over a shared ``requests.Session``.

    HTTP 502 is raised as ``BadGatewayError`` so callers can retry it; every
    other HTTP or transport failure is raised as ``UpstreamError``.
    """

    def __init__(
        self,
        settings: ClientSettings,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.settings = settings
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "User-Agent": "projectetl",
            }
        )
        if settings.token:
            self._session.headers["Authorization"] = f"Bearer {settings.token}"

    def request(self, query: QueryPayload) -> GraphQLResponse:
        url = self.settings.url
        try:
            response = self._session.post(
                url, json=query, timeout=self.settings.timeout
            )
        except requests.RequestException as error:
            raise UpstreamError(str(error), status=None, url=url) from error

        if response.status_code == 502:
            raise BadGatewayError("GitHub returned 502 Bad Gateway", url=url)
        if response.status_code >= 400:
            logger.debug(f"GitHub error body: {response.text[:500]}")
            raise UpstreamError(
                f"GitHub GraphQL request failed ({response.status_code})",
                status=response.status_code,
                url=url,
            )

        try:
            return response.json()
        except ValueError as error:
            raise UpstreamError(
                "GitHub returned a non-JSON body", status=response.status_code, url=url
            ) from error

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "GitHubGraphQLClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
