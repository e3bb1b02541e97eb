from __future__ import annotations

from typing import List

from selenium.webdriver import Edge, EdgeOptions

from webtestkit.domain.models.log_models import LogEntry
from webtestkit.infrastructure.browser.core.driver_factory import build_edge_options

from .base import BaseWebHelper


class EdgeWebHelper(BaseWebHelper):
    """Helper sobre msedgedriver (Edge Chromium)."""

    browser_name = "edge"

    def _default_options(self) -> EdgeOptions:
        return build_edge_options(headless=self.settings.browser.headless)

    def _create_driver(self, options: EdgeOptions) -> Edge:
        return Edge(options=options)

    def _read_logs(self) -> List[LogEntry]:
        return self._read_logs_or_empty()
