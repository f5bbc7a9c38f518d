"""Print the dashboard and server options resolved from the current settings.

Layers ``appsettings.json``, the optional ``.env`` file and the process
environment the same way a hosting process would.

Usage:
    uv run python scripts/print_options.py [SECTION_NAME]
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure src/ is on sys.path when running as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from hangfire_config import (  # noqa: E402
    build_configuration,
    get_dashboard_options,
    get_server_options,
)
from hangfire_config.config.defaults import DEFAULT_SECTION_NAME  # noqa: E402
from hangfire_config.config.settings import get_settings  # noqa: E402


def main() -> int:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    section_name = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SECTION_NAME

    settings = get_settings()
    configuration = build_configuration(settings)

    print("=" * 60)
    print("RESOLVED OPTIONS")
    print("=" * 60)
    print(f"Config file: {settings.config_file or '(disabled)'}")
    print(f".env file:   {settings.env_file or '(disabled)'}")
    print(f"Env prefix:  {settings.env_prefix or '(none)'}")
    print()

    dashboard = get_dashboard_options(configuration, section_name)
    server = get_server_options(configuration, section_name)

    print("[Dashboard]")
    print(dashboard.model_dump_json(by_alias=True, indent=2))
    print()
    print("[Server]")
    print(server.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
