"""
Services.

Business operations built on the Grafana client.
"""

from grafana_tools.services.dashboard import DashboardService

__all__ = ["DashboardService"]
