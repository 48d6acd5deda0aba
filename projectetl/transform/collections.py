from typing import Iterable, Iterator, List, Self, Union, overload

from projectetl.extract.fetcher import ProjectFetcher
from projectetl.transform.project import ProjectRecord


class ProjectCollection:
    def __init__(self, elements: Iterable[ProjectRecord] = ()) -> None:
        self._elements: List[ProjectRecord] = list(elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[ProjectRecord]:
        return iter(self._elements)

    @overload
    def __getitem__(self, index: int) -> ProjectRecord: ...

    @overload
    def __getitem__(self, index: slice) -> List[ProjectRecord]: ...

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[ProjectRecord, List[ProjectRecord]]:
        return self._elements[index]

    @classmethod
    def fetch_all(cls, fetcher: ProjectFetcher) -> Self:
        return cls(fetcher.fetch_all())

    def repositories(self) -> List[str]:
        seen = set()
        result = []
        for project in self._elements:
            if project.repo_name_with_owner not in seen:
                seen.add(project.repo_name_with_owner)
                result.append(project.repo_name_with_owner)
        return result
