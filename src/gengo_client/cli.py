# SPDX-License-Identifier: Apache-2.0
"""
Gengo - CLI Tool

Command-line access to the Gengo translation API. Prints decoded responses
as JSON.

Usage:
    gengo <command> [options]

Examples:
    gengo balance                                  # Account balance
    gengo --sandbox languages                      # Supported languages
    gengo language-pairs --lc-src en               # Pairs from English
    gengo submit "Hello" -s en -t ja --tier standard
    gengo job 12345 --pre-mt
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn, Sequence

from gengo_client.client import GengoClient
from gengo_client.config import GengoConfig
from gengo_client.errors import ConfigurationError, GengoError
from gengo_client.models import ApproveAction, JobArray, JobPayload, Tier

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="gengo",
        description="Gengo API client - query your account and manage translation jobs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  GENGO_PUBKEY     Public API key (or --public-key)
  GENGO_PRIVKEY    Private key (or --private-key)
  GENGO_SANDBOX    Set to 1 to use the sandbox (or --sandbox)
  GENGO_API_URL    Override the base URL (or --api-url)
""",
    )

    # Connection options
    conn_group = parser.add_argument_group("Connection options")
    conn_group.add_argument("--public-key", help="Public API key (or set GENGO_PUBKEY)")
    conn_group.add_argument("--private-key", help="Private key (or set GENGO_PRIVKEY)")
    conn_group.add_argument(
        "--sandbox",
        action="store_true",
        help="Use the sandbox environment",
    )
    conn_group.add_argument("--api-url", help="Base URL override")
    conn_group.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds (default: 30)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    sub = parser.add_subparsers(dest="command", required=True, metavar="command")

    sub.add_parser("stats", help="Account statistics")
    sub.add_parser("balance", help="Account balance")
    sub.add_parser("languages", help="Supported languages")

    pairs = sub.add_parser("language-pairs", help="Supported language pairs and prices")
    pairs.add_argument("--lc-src", help="Only pairs with this source language")

    job = sub.add_parser("job", help="Show a job")
    job.add_argument("job_id", type=int)
    job.add_argument(
        "--pre-mt",
        action="store_true",
        help="Include a machine translation while the job is pending",
    )

    jobs = sub.add_parser("jobs", help="List recent jobs, or show the given jobs")
    jobs.add_argument("job_ids", type=int, nargs="*")
    jobs.add_argument("--status", help="Only jobs with this status")
    jobs.add_argument("--count", type=int, help="Maximum number of jobs")

    comments = sub.add_parser("comments", help="Show a job's comment thread")
    comments.add_argument("job_id", type=int)

    comment = sub.add_parser("comment", help="Add a comment to a job")
    comment.add_argument("job_id", type=int)
    comment.add_argument("body")

    revisions = sub.add_parser("revisions", help="List a job's revisions")
    revisions.add_argument("job_id", type=int)

    feedback = sub.add_parser("feedback", help="Show feedback for an approved job")
    feedback.add_argument("job_id", type=int)

    approve = sub.add_parser("approve", help="Approve a reviewable job")
    approve.add_argument("job_id", type=int)
    approve.add_argument("--rating", type=int, choices=[1, 2, 3, 4, 5])
    approve.add_argument("--for-translator", help="Comment for the translator")

    delete = sub.add_parser("delete", help="Cancel an available job")
    delete.add_argument("job_id", type=int)

    preview = sub.add_parser("preview", help="Save a reviewable job's preview image")
    preview.add_argument("job_id", type=int)
    preview.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file (default: job_<id>_preview.jpg)",
    )

    # Job definition options shared by submit and quote
    for name, help_text in (
        ("submit", "Submit a job"),
        ("quote", "Quote a job without submitting it"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("body", help="Text to translate")
        p.add_argument("-s", "--source", default="en", help="Source language code (default: en)")
        p.add_argument("-t", "--target", default="ja", help="Target language code (default: ja)")
        p.add_argument(
            "--tier",
            default=Tier.STANDARD.value,
            choices=[t.value for t in Tier],
            help="Quality tier (default: standard)",
        )
        p.add_argument("--comment", help="Instructions for the translator")
        p.add_argument("--auto-approve", action="store_true", help="Approve automatically")

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GengoConfig:
    """Merge command line options over environment configuration.

    Raises:
        ConfigurationError: If keys are missing.
    """
    config = GengoConfig.from_env()
    if args.public_key:
        config.public_key = args.public_key
    if args.private_key:
        config.private_key = args.private_key
    if args.sandbox:
        config.sandbox = True
    if args.api_url:
        config.api_url = args.api_url
    config.timeout = args.timeout
    config.validate()
    return config


def to_jsonable(value: Any) -> Any:
    """Convert decoded results (dataclasses, lists) to JSON-compatible data."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, list):
        return [to_jsonable(v) for v in value]
    return value


def _job_payload(args: argparse.Namespace) -> JobPayload:
    return JobPayload(
        body_src=args.body,
        lc_src=args.source,
        lc_tgt=args.target,
        tier=args.tier,
        comment=args.comment,
        auto_approve=1 if args.auto_approve else None,
    )


async def dispatch(client: GengoClient, args: argparse.Namespace) -> Any:
    """Run the selected command and return its result."""
    command = args.command
    if command == "stats":
        return await client.account_stats()
    if command == "balance":
        return await client.account_balance()
    if command == "languages":
        return await client.languages()
    if command == "language-pairs":
        return await client.language_pairs(lc_src=args.lc_src)
    if command == "job":
        return await client.job(args.job_id, pre_mt=True if args.pre_mt else None)
    if command == "jobs":
        if args.job_ids:
            return await client.jobs_by_ids(args.job_ids)
        return await client.jobs(status=args.status, count=args.count)
    if command == "comments":
        return await client.job_comments(args.job_id)
    if command == "comment":
        await client.post_job_comment(args.job_id, args.body)
        return {"ok": True}
    if command == "revisions":
        return await client.job_revisions(args.job_id)
    if command == "feedback":
        return await client.job_feedback(args.job_id)
    if command == "approve":
        action = ApproveAction(rating=args.rating, for_translator=args.for_translator)
        await client.approve_job(args.job_id, action)
        return {"ok": True}
    if command == "delete":
        await client.delete_job(args.job_id)
        return {"ok": True}
    if command == "preview":
        output = args.output or Path(f"job_{args.job_id}_preview.jpg")
        try:
            path = await client.save_job_preview(args.job_id, output)
        except OSError as e:
            raise GengoError(f"Could not write preview to {output}: {e}") from e
        return {"saved": str(path)}
    if command == "submit":
        return await client.post_job(_job_payload(args))
    if command == "quote":
        return await client.jobs_quote(JobArray(jobs=[_job_payload(args)]))
    raise ValueError(f"Unknown command: {command}")


async def run(args: argparse.Namespace) -> int:
    """Execute the selected command.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    try:
        config = build_config(args)
    except ConfigurationError as e:
        print(
            f"Error: {e}.\n"
            "  Set --public-key/--private-key or GENGO_PUBKEY/GENGO_PRIVKEY.",
            file=sys.stderr,
        )
        return 1

    try:
        async with GengoClient(config) as client:
            result = await dispatch(client, args)
    except GengoError as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    print(json.dumps(to_jsonable(result), indent=2, ensure_ascii=False))
    return 0


def main() -> NoReturn:
    """Main entry point."""
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
