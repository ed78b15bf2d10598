"""Command line entry point.

Usage::

    python -m postergen_client templates
    python -m postergen_client logos
    python -m postergen_client generate --template-id 3 --business-name "Mama Mboga" \\
        --data '{"till_number": "123456"}' --customization '{"primary_color": "#0369a1"}'

Results are printed to stdout as JSON. Client errors are printed to stderr and
the process exits with status 1. Origins come from ``POSTERGEN_*`` environment
variables, or from a named profile in the environments YAML file.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from postergen_client.config.environments import load_environment_profiles
from postergen_client.config.settings import ClientSettings
from postergen_client.errors import PosterClientError
from postergen_client.integration.poster_client import PosterClient
from postergen_client.logging_config import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_PROFILES_PATH = str(Path(__file__).parent / "config" / "environments.yaml")


def _json_object(text: str) -> dict[str, Any]:
    try:
        value = json.loads(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not valid JSON: {exc}") from exc
    if not isinstance(value, dict):
        raise argparse.ArgumentTypeError("expected a JSON object")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="postergen_client",
        description="Query the poster backend and generate posters.",
    )
    parser.add_argument("--profile", help="Environment profile name (overrides POSTERGEN_* origins)")
    parser.add_argument("--profiles-file", default=DEFAULT_PROFILES_PATH)
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines on stderr")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("templates", help="List poster templates")
    commands.add_parser("logos", help="List predefined logos")

    template = commands.add_parser("template", help="Show one template")
    template.add_argument("template_id", type=int)

    poster = commands.add_parser("poster", help="Show one generated poster")
    poster.add_argument("poster_id", type=int)

    generate = commands.add_parser("generate", help="Generate a poster PDF")
    generate.add_argument("--template-id", type=int, required=True)
    generate.add_argument("--business-name", required=True)
    generate.add_argument("--data", type=_json_object, default={})
    generate.add_argument("--customization", type=_json_object, default={})

    return parser


def load_settings(args: argparse.Namespace, parser: argparse.ArgumentParser) -> ClientSettings:
    """Resolve settings from the environment, or from ``--profile`` when given."""
    if args.profile is None:
        return ClientSettings()

    profiles = load_environment_profiles(args.profiles_file)
    profile = profiles.get(args.profile)
    if profile is None:
        parser.error(f"unknown profile '{args.profile}' in {args.profiles_file}")
    return ClientSettings.for_profile(profile)


async def run_command(client: PosterClient, args: argparse.Namespace) -> Any:
    """Run the selected command and return a JSON-serializable result."""
    if args.command == "templates":
        return [template.model_dump() for template in await client.fetch_templates()]
    if args.command == "template":
        return (await client.fetch_template(args.template_id)).model_dump()
    if args.command == "logos":
        return await client.fetch_logos()
    if args.command == "poster":
        return (await client.fetch_poster(args.poster_id)).model_dump()

    result = await client.generate_poster(
        args.template_id,
        args.business_name,
        args.data,
        args.customization,
    )
    return result.model_dump()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args, parser)
    configure_logging(settings.log_level, json_output=args.json_logs)

    client = PosterClient(settings)
    try:
        result = asyncio.run(run_command(client, args))
    except PosterClientError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(exc.message, file=sys.stderr)
        return 1

    json.dump(result, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
