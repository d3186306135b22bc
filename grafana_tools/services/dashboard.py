"""
Dashboard Service.

Pull and push operations for Grafana dashboards. Each operation performs
one HTTP exchange and one file operation, in order, and propagates the
first failure unchanged.
"""

from pathlib import Path
from typing import Any

from grafana_tools.client import GrafanaClient
from grafana_tools.core.logging import get_logger, log_with_source
from grafana_tools.files import read_json_file, write_json_file

DASHBOARDS_ENDPOINT = "/dashboards/db"


class DashboardService:
    """
    Service for moving dashboard JSON between Grafana and local files.

    Usage:
        async with GrafanaClient(config) as client:
            service = DashboardService(client)
            await service.pull("home", Path("home.json"))
            await service.push(Path("home.json"), overwrite=True)
    """

    def __init__(self, client: GrafanaClient) -> None:
        self.client = client
        self._logger = get_logger(self.__class__.__module__)

    async def pull(self, name: str, file_path: str | Path) -> dict[str, Any]:
        """
        Fetch a dashboard by slug and save it to a file.

        Args:
            name: Dashboard slug
            file_path: Destination file, overwritten if present

        Returns:
            The written document, {"dashboard": {...}}, or {} when the
            response carries no dashboard field
        """
        result = await self.client.get(f"{DASHBOARDS_ENDPOINT}/{name}")
        document = {}
        if isinstance(result.body, dict) and "dashboard" in result.body:
            document["dashboard"] = result.body["dashboard"]

        await write_json_file(file_path, document)
        log_with_source(self._logger, "cli", "info", "Dashboard pulled", name=name, path=str(file_path))
        return document

    async def push(self, file_path: str | Path, overwrite: bool = False) -> Any:
        """
        Publish a dashboard file to Grafana.

        With overwrite set, the dashboard version is dropped and the
        server is told to replace whatever it holds.

        Args:
            file_path: Source file containing {"dashboard": {...}}
            overwrite: Replace server-side changes

        Returns:
            Parsed response body from Grafana
        """
        payload = await read_json_file(file_path)
        if overwrite:
            payload["dashboard"].pop("version", None)
            payload["overwrite"] = True

        result = await self.client.post(DASHBOARDS_ENDPOINT, payload)
        log_with_source(
            self._logger,
            "cli",
            "info",
            "Dashboard pushed",
            path=str(file_path),
            overwrite=overwrite,
        )
        return result.body
