from typing import Optional

from projectetl.config import DEFAULT_SEARCH_QUERY
from projectetl.extract._raw import QueryPayload
from projectetl.graphql.fragments.issue import ISSUE_CORE
from projectetl.graphql.fragments.repository import REPOSITORY_CORE


def build_search_text(results_per_page: int) -> str:
    return "\n".join(
        [
            REPOSITORY_CORE,
            ISSUE_CORE,
            f"""
            query($searchQuery: String!, $cursor: String) {{
                search(query: $searchQuery, type: ISSUE, first: {results_per_page}, after: $cursor) {{
                    pageInfo {{
                        hasNextPage
                        endCursor
                    }}
                    edges {{
                        node {{
                            __typename
                            ...IssueCore
                        }}
                    }}
                }}
            }}
            """,
        ]
    )


def build_search_query(
    results_per_page: int,
    cursor: Optional[str] = None,
    search_query: str = DEFAULT_SEARCH_QUERY,
) -> QueryPayload:
    """Compose a search payload for one page, starting after ``cursor`` when given."""
    return {
        "query": build_search_text(results_per_page),
        "variables": {"searchQuery": search_query, "cursor": cursor},
    }
