#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Gengo sandbox walkthrough.

Quotes a job, submits it, reads it back and lists its comment thread.
Change the settings block below to try other options.

Usage:
    pip install -e ".[examples]"
    python examples/sandbox_job.py

Environment variables (loaded from .env at the project root):
    GENGO_PUBKEY: sandbox public key
    GENGO_PRIVKEY: sandbox private key
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from gengo_client import (
    GengoAPIError,
    GengoClient,
    GengoConfig,
    JobArray,
    JobPayload,
    Tier,
)

PROJECT_ROOT = Path(__file__).parent.parent

# Load .env file from project root (API keys)
load_dotenv(PROJECT_ROOT / ".env")


# =============================================================================
# Settings
# =============================================================================

SOURCE_TEXT = "The quick brown fox jumps over the lazy dog."
SOURCE_LANG = "en"
TARGET_LANG = "ja"

# "machine" is free and finishes immediately in the sandbox
TIER = Tier.MACHINE

# Ask the service to approve the job as soon as it is translated
AUTO_APPROVE = True

# Comment posted on the job after submission (None to skip)
COMMENT = "Submitted from the sandbox example."

# =============================================================================
# Main
# =============================================================================


async def main() -> None:
    config = GengoConfig.from_env()
    config.sandbox = True
    if not config.public_key or not config.private_key:
        print("Error: GENGO_PUBKEY and GENGO_PRIVKEY must be set")
        print("Set them in .env or with: export GENGO_PUBKEY=... GENGO_PRIVKEY=...")
        sys.exit(1)

    payload = JobPayload(
        body_src=SOURCE_TEXT,
        lc_src=SOURCE_LANG,
        lc_tgt=TARGET_LANG,
        tier=TIER,
        auto_approve=1 if AUTO_APPROVE else None,
    )

    print("=" * 60)
    print("Gengo Sandbox Example")
    print("=" * 60)
    print(f"Base URL:  {config.base_url}")
    print(f"Languages: {SOURCE_LANG} -> {TARGET_LANG}")
    print(f"Tier:      {payload.tier}")
    print("=" * 60)

    async with GengoClient(config) as client:
        balance = await client.account_balance()
        print(f"\nBalance: {balance.credits} {balance.currency}")

        quotes = await client.jobs_quote(JobArray(jobs=[payload]))
        for quote in quotes:
            print(f"Quote: {quote.unit_count} units, {quote.credits} credits, ETA {quote.eta}s")

        try:
            job = await client.post_job(payload)
        except GengoAPIError as e:
            print(f"\nSubmission rejected: {e}")
            sys.exit(1)
        print(f"\nSubmitted job {job.job_id} (status: {job.status})")

        if job.job_id is None:
            return

        if COMMENT:
            await client.post_job_comment(job.job_id, COMMENT)

        job = await client.job(job.job_id, pre_mt=True)
        print(f"Status:      {job.status}")
        print(f"Translation: {job.body_tgt}")

        for comment in await client.job_comments(job.job_id):
            print(f"[{comment.author}] {comment.body}")


if __name__ == "__main__":
    asyncio.run(main())
