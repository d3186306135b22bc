"""
CLI Commands.

Organized by domain/feature area.
"""

from grafana_tools.cli.commands.dashboard import pull, push

__all__ = [
    "pull",
    "push",
]
