"""
grafana-tools.

Pull Grafana dashboards to local JSON files and push them back.
"""

__version__ = "1.0.0"
