from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Self

from projectetl.extract._raw import RawIssue, RawRepository


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (dict, list, tuple, set)):
        return not value
    return False


def _language_blank(repository: RawRepository) -> bool:
    language = repository.get("primaryLanguage")
    return is_blank(language) or is_blank(language.get("name"))


def is_issue_acceptable(issue: Optional[RawIssue]) -> bool:
    """Return False for issue nodes that should not become projects.

    Rejects an empty node, a repository without a primary language or a
    description, and an issue without body text.
    """
    if is_blank(issue):
        return False

    repository = issue.get("repository")
    if is_blank(repository):
        return False

    return not (
        _language_blank(repository)
        or is_blank(repository.get("description"))
        or is_blank(issue.get("bodyText"))
    )


@dataclass(frozen=True)
class ProjectRecord:
    issue_database_id: int
    issue_number: int
    issue_participants: int
    issue_timeline_events: int
    issue_title: str
    issue_url: str
    repo_database_id: int
    repo_description: str
    repo_code_of_conduct_url: str
    repo_forks: int
    repo_language: str
    repo_name: str
    repo_name_with_owner: str
    repo_stars: int
    repo_watchers: int
    repo_url: str

    @classmethod
    def from_issue(cls, issue: RawIssue) -> Self:
        repository = issue["repository"]
        code_of_conduct = repository.get("codeOfConduct") or {}

        return cls(
            issue_database_id=issue["databaseId"],
            issue_number=issue["number"],
            issue_participants=issue["participants"]["totalCount"],
            issue_timeline_events=issue["timeline"]["totalCount"],
            issue_title=issue["title"],
            issue_url=issue["url"],
            repo_database_id=repository["databaseId"],
            repo_description=repository["description"],
            repo_code_of_conduct_url=code_of_conduct.get("url") or "",
            repo_forks=repository["forks"]["totalCount"],
            repo_language=repository["primaryLanguage"]["name"],
            repo_name=repository["name"],
            repo_name_with_owner=repository["nameWithOwner"],
            repo_stars=repository["stargazers"]["totalCount"],
            repo_watchers=repository["watchers"]["totalCount"],
            repo_url=repository["url"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
