"""Allow `python -m grafana_tools`."""

from grafana_tools.cli.app import run

if __name__ == "__main__":
    run()
