from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Self, TypedDict


class QueryPayload(TypedDict):
    query: str
    variables: Dict[str, Optional[str]]


class ErrorDetail(TypedDict, total=False):
    message: str
    type: str
    path: List[Any]
    locations: List[Dict[str, int]]


class TotalCount(TypedDict):
    totalCount: int


class RawLanguage(TypedDict):
    name: Optional[str]


class RawCodeOfConduct(TypedDict):
    url: Optional[str]


class RawRepository(TypedDict, total=False):
    databaseId: int
    description: Optional[str]
    codeOfConduct: Optional[RawCodeOfConduct]
    forks: TotalCount
    primaryLanguage: Optional[RawLanguage]
    name: str
    nameWithOwner: str
    stargazers: TotalCount
    watchers: TotalCount
    url: str


class RawIssue(TypedDict, total=False):
    databaseId: int
    number: int
    participants: TotalCount
    timeline: TotalCount
    title: str
    url: str
    bodyText: Optional[str]
    repository: Optional[RawRepository]


class Edge(TypedDict, total=False):
    node: Optional[RawIssue]


class PageInfo(TypedDict, total=False):
    hasNextPage: bool
    endCursor: Optional[str]


class SearchConnection(TypedDict, total=False):
    pageInfo: PageInfo
    edges: Optional[List[Edge]]


class SearchData(TypedDict, total=False):
    search: Optional[SearchConnection]


class GraphQLResponse(TypedDict, total=False):
    data: Optional[SearchData]
    errors: Optional[List[ErrorDetail]]


@dataclass(frozen=True)
class SearchPage:
    has_next_page: bool
    end_cursor: Optional[str]
    edges: List[Edge]

    @classmethod
    def from_data(cls, data: SearchData) -> Optional[Self]:
        search = data.get("search")
        if not search:
            return None

        page_info = search.get("pageInfo") or {}
        return cls(
            has_next_page=bool(page_info.get("hasNextPage", False)),
            end_cursor=page_info.get("endCursor"),
            edges=list(search.get("edges") or []),
        )
