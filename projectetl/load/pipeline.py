import argparse
import logging
import os
import sys
from dataclasses import replace
from typing import List, Optional

from dotenv import load_dotenv

from projectetl.config import ClientSettings, FetcherSettings
from projectetl.extract.client import GitHubGraphQLClient
from projectetl.extract.errors import FetchError, UpstreamError
from projectetl.extract.fetcher import ProjectFetcher
from projectetl.transform.collections import ProjectCollection
from projectetl.transform.groups import ProjectGroup

logger = logging.getLogger(__name__)


def run(
    fetcher_settings: FetcherSettings, client_settings: ClientSettings
) -> ProjectCollection:
    with GitHubGraphQLClient(client_settings) as client:
        fetcher = ProjectFetcher(client, fetcher_settings)
        return ProjectCollection.fetch_all(fetcher)


def print_summary(projects: ProjectCollection):
    group = ProjectGroup().by_language(projects)
    counts = sorted(group.count().items(), key=lambda item: (-item[1], item[0]))

    print(f"Projects    : {len(projects)}")
    print(f"Repositories: {len(projects.repositories())}")
    for language, count in counts:
        print(f"  {language:<20} {count}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Fetch Hacktoberfest issues from GitHub and flatten them into projects"
    )
    parser.add_argument("--env-file", "-e", default=".env", help="Path to .env file")
    parser.add_argument("--max-retries", type=int, help="Retries per page on HTTP 502")
    parser.add_argument("--search-query", help="GitHub issue search query")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if os.path.exists(args.env_file):
        load_dotenv(args.env_file)

    try:
        fetcher_settings = FetcherSettings.from_env()
        client_settings = ClientSettings.from_env()
        if args.max_retries is not None:
            fetcher_settings = replace(fetcher_settings, max_retries=args.max_retries)
        if args.search_query:
            fetcher_settings = replace(fetcher_settings, search_query=args.search_query)
    except ValueError as error:
        logger.error(f"Invalid configuration: {error}")
        return 1

    if not client_settings.token:
        logger.error("GITHUB_TOKEN is not set")
        return 1

    try:
        projects = run(fetcher_settings, client_settings)
    except FetchError as error:
        logger.error(f"Fetch failed: {error}")
        return 1
    except UpstreamError as error:
        logger.error(f"GitHub request failed (status={error.status}): {error}")
        return 1

    print_summary(projects)
    return 0


if __name__ == "__main__":
    sys.exit(main())
