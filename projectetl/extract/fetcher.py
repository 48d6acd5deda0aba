import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from projectetl.config import NODE_LIMIT, FetcherSettings
from projectetl.extract._client import GraphQLClient
from projectetl.extract._raw import (
    Edge,
    ErrorDetail,
    GraphQLResponse,
    QueryPayload,
    SearchPage,
)
from projectetl.extract.batch import FetchRun
from projectetl.extract.errors import BadGatewayError, FetchError, FetchErrorKind
from projectetl.extract.graphql.queries.search import build_search_query
from projectetl.transform.project import ProjectRecord, is_blank, is_issue_acceptable

logger = logging.getLogger(__name__)


@dataclass
class FetchState:
    started: bool = False
    has_next_page: bool = False
    cursor: Optional[str] = None
    collected_errors: Optional[List[ErrorDetail]] = None

    @property
    def incomplete(self) -> bool:
        return not self.started or self.has_next_page


class ProjectFetcher:
    """Walks every page of the issue search and flattens issues into projects.

    Pages are fetched one after another, each continuing from the previous
    page's ``endCursor``. A page that fails with a 502 is requested again with
    the same query, up to ``settings.max_retries`` times. Records are only
    returned once the last page has been processed; any ``FetchError`` aborts
    the whole fetch and leaves the fetcher unusable.
    """

    def __init__(
        self, client: GraphQLClient, settings: FetcherSettings = FetcherSettings()
    ) -> None:
        self.client = client
        self.settings = settings
        self.last_run: Optional[FetchRun] = None
        self._failed = False

    def fetch_all(self) -> List[ProjectRecord]:
        if self._failed:
            raise RuntimeError(
                "ProjectFetcher failed previously; build a new fetcher to retry."
            )

        state = FetchState()
        run = FetchRun(search_query=self.settings.search_query)
        self.last_run = run
        projects: List[ProjectRecord] = []

        try:
            while state.incomplete:
                state.started = True
                self._fetch_next_page(state, run, projects)
        except Exception as error:
            self._failed = True
            run.mark_failed(str(error))
            raise

        run.mark_success()
        logger.info(
            f"Run {run.load_id}: fetched {len(projects)} projects from {run.pages} page(s) "
            f"({run.rejected_edges} rejected, {run.retries} retries)"
        )
        return projects

    def _request_with_retries(
        self, state: FetchState, run: FetchRun
    ) -> Tuple[GraphQLResponse, QueryPayload]:
        query = build_search_query(
            results_per_page=NODE_LIMIT,
            cursor=state.cursor,
            search_query=self.settings.search_query,
        )
        retry_count = 0

        while True:
            run.attempts += 1
            try:
                return self.client.request(query), query
            except BadGatewayError as error:
                if retry_count >= self.settings.max_retries:
                    logger.error(
                        f"Giving up on page after {retry_count} retries "
                        f"(cursor={state.cursor!r})"
                    )
                    raise FetchError(
                        "Max retries exceeded",
                        kind=FetchErrorKind.MAX_RETRIES_EXCEEDED,
                        errors=state.collected_errors,
                        query=query,
                    ) from error

                retry_count += 1
                run.retries += 1
                logger.warning(
                    f"Bad gateway, retrying page ({retry_count}/"
                    f"{self.settings.max_retries}, cursor={state.cursor!r})"
                )

    def _fetch_next_page(
        self, state: FetchState, run: FetchRun, projects: List[ProjectRecord]
    ) -> None:
        logger.debug(f"Requesting page {run.pages + 1} (cursor={state.cursor!r})")
        response, query = self._request_with_retries(state, run)

        page = None
        if not self._response_invalid(response, state):
            page = SearchPage.from_data(response["data"])

        if page is not None and page.has_next_page and is_blank(page.end_cursor):
            logger.error("Search reported a next page without an end cursor")
            page = None

        if page is None:
            logger.error("Invalid response received from search")
            raise FetchError(
                "Invalid response received",
                kind=FetchErrorKind.INVALID_RESPONSE,
                errors=state.collected_errors,
                query=query,
            )

        state.has_next_page = page.has_next_page
        state.cursor = page.end_cursor

        accepted = self._build_projects(page.edges, projects)
        run.add_page(accepted=accepted, rejected=len(page.edges) - accepted)

    def _response_invalid(self, response: GraphQLResponse, state: FetchState) -> bool:
        if not response:
            return True

        errors = response.get("errors")
        if errors:
            logger.warning(f"Search returned {len(errors)} GraphQL error(s)")
            state.collected_errors = errors

        return is_blank(response.get("data"))

    def _build_projects(self, edges: List[Edge], projects: List[ProjectRecord]) -> int:
        accepted = 0
        for edge in edges:
            issue = (edge or {}).get("node")
            if not is_issue_acceptable(issue):
                continue

            projects.append(ProjectRecord.from_issue(issue))
            accepted += 1
        return accepted
