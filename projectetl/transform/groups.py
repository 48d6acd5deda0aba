from collections import defaultdict
from typing import Dict, Iterable

from projectetl.transform.project import ProjectRecord


class ProjectGroup(defaultdict):

    def __init__(self):
        super().__init__(list)

    def by_language(self, projects: Iterable[ProjectRecord]) -> 'ProjectGroup':
        self.clear()
        for project in projects:
            self[project.repo_language].append(project)
        return self

    def count(self) -> Dict[str, int]:
        return {key: len(items) for key, items in self.items()}
