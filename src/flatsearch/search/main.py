import logging
import sys

from flatsearch.common.config import settings
from flatsearch.common.errors import FlatsearchError
from flatsearch.common.logging import setup_logging
from flatsearch.common.search_url import describe_filters
from flatsearch.common.types import Credentials
from flatsearch.search.api import search_listings


logger = logging.getLogger("main")


def main() -> int:
    setup_logging(settings.log_level)

    if not settings.api_key or not settings.api_secret:
        logger.error("IDEALISTA_API_KEY and IDEALISTA_API_SECRET must be set")
        return 2

    credentials = Credentials(api_key=settings.api_key, secret=settings.api_secret)
    filters = settings.default_filters
    logger.info("Searching with %s", describe_filters(filters))

    try:
        table = search_listings(credentials, filters)
    except FlatsearchError as exc:
        logger.error("Search failed: %s", exc)
        return 1

    logger.info("Listing table rows=%s columns=%s", len(table), len(table.columns))
    frame = table.to_dataframe()
    print(frame.to_string(max_rows=20, max_colwidth=40))
    return 0


if __name__ == "__main__":
    sys.exit(main())
