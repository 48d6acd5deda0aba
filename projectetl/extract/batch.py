from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class FetchRun:
    search_query: str
    load_id: UUID = field(default_factory=uuid4)

    pages: int = 0
    attempts: int = 0
    retries: int = 0
    accepted_edges: int = 0
    rejected_edges: int = 0

    status: str = "loading"
    error: Optional[str] = None

    def add_page(self, accepted: int, rejected: int):
        self.pages += 1
        self.accepted_edges += accepted
        self.rejected_edges += rejected

    def mark_success(self):
        self.status = "success"

    def mark_failed(self, error: str):
        self.error = error
        self.status = "failed"
