"""Utility for verifying the TikTok configuration before deploying.

The server only warns about missing credentials at startup and keeps serving,
so a broken deployment shows up as failed logins. Running this check first
surfaces the gap::

    python -m scripts.check_env --env-file /opt/framelift/.env
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from app.core.config import AppSettings, _load_env_file

EXIT_OK = 0
EXIT_VALIDATION_ERROR = 2
EXIT_RUNTIME_ERROR = 5


def _load_settings(env_file: Path) -> AppSettings:
    """Build settings from the supplied env file layered under the environment."""
    _load_env_file(str(env_file))
    return AppSettings()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate the TikTok credentials and server settings."
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        type=Path,
        help="Path to the environment file (default: .env in the repo root).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    env_file: Path = args.env_file

    if not env_file.exists():
        print(
            f"Environment file {env_file} does not exist. "
            "Ensure the path is correct or create it before running this tool.",
            file=sys.stderr,
        )
        return EXIT_RUNTIME_ERROR

    try:
        settings = _load_settings(env_file)
    except ValidationError as exc:
        print(
            "Settings validation failed. Invalid values detected:\n"
            f"{exc.json(indent=2)}",
            file=sys.stderr,
        )
        return EXIT_VALIDATION_ERROR

    missing = settings.missing_required()
    if missing:
        print(
            "Missing required settings: " + ", ".join(missing),
            file=sys.stderr,
        )
        return EXIT_VALIDATION_ERROR

    print(
        f"Configuration OK (port={settings.port}, frontend_url={settings.frontend_url})."
    )
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
