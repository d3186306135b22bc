"""
CLI Module.

Command-line client built with Typer for pulling and pushing Grafana
dashboards.

Architecture:
- CLI is a thin presentation layer
- Dashboard logic lives in grafana_tools.services
- Grafana is called via HTTP (httpx)
- Errors are rendered here and only here

Usage:
    grafana --help
    grafana pull home-dashboard home.json
    grafana push home-dashboard home.json --overwrite
"""
