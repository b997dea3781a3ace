# SPDX-License-Identifier: Apache-2.0
"""Async client for the Gengo translation API."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Iterable

import aiohttp

from gengo_client.config import GengoConfig
from gengo_client.envelope import parse_envelope
from gengo_client.errors import ResponseFormatError, TransportError
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
    JobSummary,
    Language,
    LanguagePair,
    Quote,
    RejectAction,
    ReviseAction,
    Revision,
)
from gengo_client.request import build_form, build_query, build_url

logger = logging.getLogger(__name__)

_ACCEPT_JSON = {"Accept": "application/json"}
_FORM_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/x-www-form-urlencoded",
}


class GengoClient:
    """Gengo API client.

    Each call signs the request, sends it with aiohttp and decodes the
    ``{opstat, response | err}`` envelope. Use it as an async context
    manager, or call close() when done.

    Example:
        async with GengoClient(GengoConfig.from_env()) as client:
            balance = await client.account_balance()
    """

    def __init__(self, config: GengoConfig) -> None:
        """Initialize GengoClient.

        Args:
            config: Credentials and endpoint selection.

        Raises:
            ConfigurationError: If a key is missing.
        """
        config.validate()
        self._config = config
        self._session: aiohttp.ClientSession | None = None

    @property
    def config(self) -> GengoConfig:
        """Return client configuration."""
        return self._config

    async def __aenter__(self) -> GengoClient:
        """Enter async context manager."""
        await self._ensure_session()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists.

        Returns:
            Active aiohttp session.
        """
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self._config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _send(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        data: Any = None,
        auth_required: bool = True,
    ) -> tuple[int, str, bytes]:
        """Issue a signed request.

        GET and DELETE put everything in the query string. POST and PUT send
        a form body whose ``data`` field is the JSON payload.

        Returns:
            Tuple of (HTTP status, content type, raw body).

        Raises:
            TransportError: On connection failure or timeout.
        """
        session = await self._ensure_session()
        url = build_url(self._config.base_url, endpoint)
        cfg = self._config

        if method in ("POST", "PUT"):
            body: str | None = build_form(cfg.public_key, cfg.private_key, data)
            headers = _FORM_HEADERS
        else:
            query = build_query(cfg.public_key, cfg.private_key, auth_required, params)
            url = f"{url}?{query}"
            body = None
            headers = _ACCEPT_JSON

        logger.debug("%s %s", method, endpoint)
        try:
            async with session.request(
                method, url, data=body, headers=headers
            ) as response:
                raw = await response.read()
                return response.status, response.content_type, raw
        except asyncio.TimeoutError as e:
            raise TransportError(f"{method} {endpoint} timed out") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"{method} {endpoint} failed: {e}") from e

    async def _call(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        data: Any = None,
        auth_required: bool = True,
    ) -> Any:
        """Issue a request and return the envelope's ``response`` member.

        Raises:
            GengoAPIError: If the API reports opstat "error".
            TransportError: On transport failure, or an HTTP error status
                without a readable envelope.
            ResponseFormatError: If a successful response is malformed.
        """
        status, _, raw = await self._send(
            method,
            endpoint,
            params=params,
            data=data,
            auth_required=auth_required,
        )
        try:
            return parse_envelope(raw)
        except ResponseFormatError as e:
            if status >= 400:
                raise TransportError(
                    f"{method} {endpoint} returned HTTP {status}", status=status
                ) from e
            raise

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------

    async def account_stats(self) -> AccountStats:
        """Retrieve account statistics (credits spent, member since)."""
        return AccountStats.from_dict(await self._call("GET", "account/stats"))

    async def account_balance(self) -> AccountBalance:
        """Retrieve the current credit balance."""
        return AccountBalance.from_dict(await self._call("GET", "account/balance"))

    # ------------------------------------------------------------------
    # Single job
    # ------------------------------------------------------------------

    async def job(self, job_id: int, **params: Any) -> Job:
        """Retrieve a job.

        Args:
            job_id: Job identifier.
            **params: Optional query parameters, e.g. ``pre_mt=True`` to get
                a machine translation while the human one is pending.
        """
        data = await self._call("GET", f"translate/job/{job_id}", params=params)
        return Job.from_response(data)

    async def post_job(self, payload: JobPayload) -> Job:
        """Submit a single job for translation."""
        data = await self._call("POST", "translate/job", data={"job": payload.to_dict()})
        return Job.from_response(data)

    async def delete_job(self, job_id: int) -> None:
        """Cancel a job. Only available jobs (not yet started) can be cancelled."""
        await self._call("DELETE", f"translate/job/{job_id}")

    async def revise_job(self, job_id: int, action: ReviseAction) -> None:
        """Return a reviewable job to the translator with a comment."""
        await self._call("PUT", f"translate/job/{job_id}", data=action.to_dict())

    async def approve_job(self, job_id: int, action: ApproveAction | None = None) -> None:
        """Approve a reviewable job."""
        action = action or ApproveAction()
        await self._call("PUT", f"translate/job/{job_id}", data=action.to_dict())

    async def reject_job(self, job_id: int, action: RejectAction) -> None:
        """Reject a reviewable job."""
        await self._call("PUT", f"translate/job/{job_id}", data=action.to_dict())

    async def job_preview(self, job_id: int) -> bytes:
        """Download the preview image of a reviewable job.

        Returns:
            Raw image bytes.

        Raises:
            GengoAPIError: If the service answers with an error envelope.
            TransportError: On transport failure or HTTP error status.
        """
        endpoint = f"translate/job/{job_id}/preview"
        status, content_type, raw = await self._send("GET", endpoint)
        if content_type == "application/json" or status >= 400:
            # Errors come back as a JSON envelope instead of an image
            try:
                parse_envelope(raw)
            except ResponseFormatError as e:
                if status >= 400:
                    raise TransportError(
                        f"GET {endpoint} returned HTTP {status}", status=status
                    ) from e
                raise
            if status >= 400:
                raise TransportError(f"GET {endpoint} returned HTTP {status}", status=status)
            raise ResponseFormatError("Expected preview image, got a JSON response")
        return raw

    async def save_job_preview(self, job_id: int, path: Path | str) -> Path:
        """Download a job preview and write it to path."""
        raw = await self.job_preview(job_id)
        target = Path(path)
        target.write_bytes(raw)
        logger.debug("Saved preview of job %s to %s", job_id, target)
        return target

    async def job_revisions(self, job_id: int) -> JobRevisions:
        """List the revisions of a job."""
        data = await self._call("GET", f"translate/job/{job_id}/revisions")
        return JobRevisions.from_dict(data)

    async def job_revision(self, job_id: int, revision_id: int) -> Revision:
        """Retrieve one revision of a job."""
        data = await self._call("GET", f"translate/job/{job_id}/revision/{revision_id}")
        if isinstance(data, dict) and "revision" in data:
            data = data["revision"]
        return Revision.from_dict(data)

    async def job_feedback(self, job_id: int) -> Feedback:
        """Retrieve the feedback submitted for an approved job."""
        data = await self._call("GET", f"translate/job/{job_id}/feedback")
        if isinstance(data, dict) and "feedback" in data:
            data = data["feedback"]
        return Feedback.from_dict(data)

    async def job_comments(self, job_id: int) -> list[Comment]:
        """Retrieve the comment thread of a job, oldest first."""
        data = await self._call("GET", f"translate/job/{job_id}/comments")
        if not isinstance(data, dict):
            raise ResponseFormatError("Bad JSON: comments response is not an object")
        thread = data.get("thread") or []
        if not isinstance(thread, list):
            raise ResponseFormatError("Bad JSON: 'thread' is not an array")
        return [Comment.from_dict(c) for c in thread]

    async def post_job_comment(self, job_id: int, body: str) -> None:
        """Add a comment to a job's thread."""
        await self._call("POST", f"translate/job/{job_id}/comment", data={"body": body})

    # ------------------------------------------------------------------
    # Multiple jobs
    # ------------------------------------------------------------------

    async def jobs(self, **params: Any) -> list[JobSummary]:
        """List recent jobs.

        Args:
            **params: Optional filters such as ``status``,
                ``timestamp_after`` and ``count``.
        """
        data = await self._call("GET", "translate/jobs", params=params)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ResponseFormatError("Bad JSON: jobs response is not an array")
        return [JobSummary.from_dict(j) for j in data]

    async def jobs_by_ids(self, job_ids: Iterable[int]) -> list[Job]:
        """Retrieve several jobs in one call.

        Raises:
            ValueError: If job_ids is empty.
        """
        ids = [str(int(job_id)) for job_id in job_ids]
        if not ids:
            raise ValueError("job_ids must not be empty")
        data = await self._call("GET", f"translate/jobs/{','.join(ids)}")
        if not isinstance(data, dict):
            raise ResponseFormatError("Bad JSON: jobs response is not an object")
        jobs = data.get("jobs") or []
        if not isinstance(jobs, list):
            raise ResponseFormatError("Bad JSON: 'jobs' is not an array")
        return [Job.from_dict(j) for j in jobs]

    async def post_jobs(self, job_array: JobArray) -> dict[str, Any]:
        """Submit a batch of jobs.

        Returns:
            The decoded ``response`` member (order id, credits used, ...).
        """
        data = await self._call("POST", "translate/jobs", data=job_array.to_dict())
        return data if isinstance(data, dict) else {"response": data}

    async def jobs_group(self, group_id: int) -> dict[str, Any]:
        """Retrieve the jobs submitted together as a group."""
        data = await self._call("GET", f"translate/jobs/group/{group_id}")
        return data if isinstance(data, dict) else {"response": data}

    # ------------------------------------------------------------------
    # Service
    # ------------------------------------------------------------------

    async def languages(self) -> list[Language]:
        """List supported languages. Does not require a signature."""
        data = await self._call("GET", "translate/service/languages", auth_required=False)
        if not isinstance(data, list):
            raise ResponseFormatError("Bad JSON: languages response is not an array")
        return [Language.from_dict(lang) for lang in data]

    async def language_pairs(self, **params: Any) -> list[LanguagePair]:
        """List supported language pairs and prices.

        Args:
            **params: Optional filter, e.g. ``lc_src="en"``.
        """
        data = await self._call(
            "GET",
            "translate/service/language_pairs",
            params=params,
            auth_required=False,
        )
        if not isinstance(data, list):
            raise ResponseFormatError("Bad JSON: language pairs response is not an array")
        return [LanguagePair.from_dict(pair) for pair in data]

    async def jobs_quote(self, job_array: JobArray) -> list[Quote]:
        """Get price and ETA estimates for a batch of jobs without submitting it."""
        data = await self._call(
            "POST", "translate/service/quote", data=job_array.to_dict()
        )
        return Quote.list_from_response(data)
