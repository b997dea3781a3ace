# SPDX-License-Identifier: Apache-2.0
"""Client library for the Gengo translation API.

Usage:
    from gengo_client import GengoClient, GengoConfig, JobPayload

    config = GengoConfig(public_key="...", private_key="...", sandbox=True)
    async with GengoClient(config) as client:
        job = await client.post_job(
            JobPayload(body_src="Hello", lc_src="en", lc_tgt="ja", tier="standard")
        )
"""

from gengo_client.auth import hmac_sha1_hex, sign
from gengo_client.client import GengoClient
from gengo_client.config import API_URL, SANDBOX_URL, GengoConfig
from gengo_client.errors import (
    ConfigurationError,
    GengoAPIError,
    GengoError,
    ResponseFormatError,
    TransportError,
)
from gengo_client.models import (
    AccountBalance,
    AccountStats,
    ApproveAction,
    Comment,
    Feedback,
    Job,
    JobArray,
    JobPayload,
    JobRevisions,
    JobStatus,
    JobSummary,
    Language,
    LanguagePair,
    Quote,
    RejectAction,
    ReviseAction,
    Revision,
    RevisionSummary,
    Tier,
)

__all__ = [
    # Client and configuration
    "GengoClient",
    "GengoConfig",
    "API_URL",
    "SANDBOX_URL",
    # Signing
    "hmac_sha1_hex",
    "sign",
    # Exceptions
    "GengoError",
    "ConfigurationError",
    "TransportError",
    "ResponseFormatError",
    "GengoAPIError",
    # Response types
    "AccountStats",
    "AccountBalance",
    "Job",
    "JobSummary",
    "Revision",
    "RevisionSummary",
    "JobRevisions",
    "Feedback",
    "Comment",
    "LanguagePair",
    "Language",
    "Quote",
    # Request types
    "JobPayload",
    "JobArray",
    "ReviseAction",
    "ApproveAction",
    "RejectAction",
    "Tier",
    "JobStatus",
]

__version__ = "0.1.0"
