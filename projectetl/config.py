import os
from dataclasses import dataclass
from typing import Mapping, Optional, Self


NODE_LIMIT = 100
DEFAULT_MAX_RETRIES = 7
DEFAULT_TIMEOUT = 30.0

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
DEFAULT_SEARCH_QUERY = "label:hacktoberfest state:open type:issue"


@dataclass(frozen=True)
class FetcherSettings:
    max_retries: int = DEFAULT_MAX_RETRIES
    search_query: str = DEFAULT_SEARCH_QUERY

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> Self:
        raw_retries = environ.get("IMPORT_MAX_RETRIES")
        return cls(
            max_retries=int(raw_retries)
            if raw_retries
            else DEFAULT_MAX_RETRIES,
            search_query=environ.get("IMPORT_SEARCH_QUERY") or DEFAULT_SEARCH_QUERY,
        )


@dataclass(frozen=True)
class ClientSettings:
    token: Optional[str]
    url: str = GITHUB_GRAPHQL_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> Self:
        raw_timeout = environ.get("GITHUB_TIMEOUT")
        return cls(
            token=environ.get("GITHUB_TOKEN") or None,
            url=environ.get("GITHUB_GRAPHQL_URL") or GITHUB_GRAPHQL_URL,
            timeout=float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT,
        )
