"""Command Handler: Orchestrates CLI command execution.

Receives commands from the main entry point (main.py), runs the fetches
through the injected RESTGetter and reports every outcome through the
UserInterface. This is the only place where retrieval errors are caught.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence, Tuple

from quotafetch.domain.interfaces.rest_getter import RESTGetter
from quotafetch.domain.interfaces.user_interface import UserInterface
from quotafetch.domain.models.common import URL
from quotafetch.domain.models.decoding import JSONDocument
from quotafetch.domain.models.errors import RESTError, StatusError

logger = logging.getLogger(__name__)


class CommandHandler:
    """Handles incoming commands and delegates to the getter."""

    def __init__(self, getter: RESTGetter, ui: UserInterface):
        self.getter = getter
        self.ui = ui

    def _fetch(self, url: URL) -> Tuple[JSONDocument, Optional[RESTError]]:
        document = JSONDocument()
        try:
            self.getter.get(url, document)
        except RESTError as e:
            return document, e
        return document, None

    def handle_get(self, urls: Sequence[str], workers: int = 1, raw: bool = False) -> int:
        """Handles the 'get' command.

        Fetches every URL through the shared getter, so a rate-limited getter
        governs all workers together, and displays documents in input order.

        Returns:
            Number of failed fetches.
        """
        logger.info(f"Handling 'get' for {len(urls)} URL(s) with {workers} worker(s)")
        targets = [URL(u) for u in urls]
        with ThreadPoolExecutor(max_workers=max(1, workers)) as pool:
            outcomes = list(pool.map(self._fetch, targets))

        failures = 0
        for url, (document, error) in zip(targets, outcomes):
            if error is None:
                self.ui.display_json(document.value, title=url if len(targets) > 1 else None, raw=raw)
                continue
            failures += 1
            logger.debug(f"GET {url} failed: {error!r}")
            if isinstance(error, StatusError) and error.is_quota_exceeded:
                self.ui.display_warning(f"{url}: remote quota exceeded, consider a lower --limit")
            self.ui.display_error(f"{url}: {error}")

        if len(targets) > 1:
            self.ui.display_info(f"{len(targets) - failures} of {len(targets)} documents fetched")
        return failures
