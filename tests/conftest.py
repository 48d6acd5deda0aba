import copy
from typing import Any, Dict, List, Optional

import pytest

from projectetl.extract._client import GraphQLClient


_ISSUE = {
    "databaseId": 1001,
    "number": 42,
    "participants": {"totalCount": 3},
    "timeline": {"totalCount": 11},
    "title": "Add dark mode",
    "url": "https://github.com/octo/widgets/issues/42",
    "bodyText": "The UI needs a dark theme.",
    "repository": {
        "databaseId": 77,
        "description": "Widgets for everyone",
        "codeOfConduct": {"url": "https://github.com/octo/widgets/blob/main/CODE_OF_CONDUCT.md"},
        "forks": {"totalCount": 12},
        "primaryLanguage": {"name": "Python"},
        "name": "widgets",
        "nameWithOwner": "octo/widgets",
        "stargazers": {"totalCount": 250},
        "watchers": {"totalCount": 9},
        "url": "https://github.com/octo/widgets",
    },
}


def build_issue(**overrides) -> Dict[str, Any]:
    issue = copy.deepcopy(_ISSUE)
    repository = overrides.pop("repository", None)
    issue.update(overrides)
    if repository:
        issue["repository"].update(repository)
    return issue


def build_response(
    issues: List[Optional[Dict[str, Any]]],
    has_next_page: bool = False,
    end_cursor: Optional[str] = None,
    errors: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    response: Dict[str, Any] = {
        "data": {
            "search": {
                "pageInfo": {"hasNextPage": has_next_page, "endCursor": end_cursor},
                "edges": [{"node": issue} for issue in issues],
            }
        }
    }
    if errors is not None:
        response["errors"] = errors
    return response


class ScriptedClient(GraphQLClient):
    """Replays a list of responses; exception instances in the script are raised."""

    def __init__(self, script: List[Any]):
        self.script = list(script)
        self.queries: List[Dict[str, Any]] = []

    def request(self, query):
        self.queries.append(query)
        outcome = self.script.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def issue_factory():
    return build_issue


@pytest.fixture
def response_factory():
    return build_response


@pytest.fixture
def scripted_client():
    return ScriptedClient
