# SPDX-License-Identifier: Apache-2.0
"""Typed request and response structures for the Gengo API.

Response types are built with ``from_dict`` from the ``response`` member of
an envelope. Request types serialize with ``to_dict``; optional fields that
were never set are left out of the payload.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Optional

from gengo_client.envelope import as_float, as_int, as_str
from gengo_client.errors import ResponseFormatError


class Tier(str, Enum):
    """Translation quality tiers."""

    MACHINE = "machine"
    STANDARD = "standard"
    PRO = "pro"
    ULTRA = "ultra"


class JobStatus(str, Enum):
    """Lifecycle states a job moves through."""

    AVAILABLE = "available"
    PENDING = "pending"
    REVIEWABLE = "reviewable"
    APPROVED = "approved"
    REVISING = "revising"
    REJECTED = "rejected"
    CANCELLED = "cancelled"
    HELD = "held"


def _require_dict(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ResponseFormatError(
            f"Expected object for {what}, got {type(data).__name__}"
        )
    return data


def _require_list(data: Any, what: str) -> list[Any]:
    if not isinstance(data, list):
        raise ResponseFormatError(
            f"Expected array for {what}, got {type(data).__name__}"
        )
    return data


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


# ---------------------------------------------------------------------------
# Account
# ---------------------------------------------------------------------------


@dataclass
class AccountStats:
    """Account statistics.

    Attributes:
        user_since: Account creation time (Unix seconds).
        credits_spent: Total credits spent.
        currency: Account currency code.
    """

    user_since: Optional[int]
    credits_spent: Optional[float]
    currency: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> AccountStats:
        d = _require_dict(data, "account stats")
        return cls(
            user_since=as_int(d.get("user_since")),
            credits_spent=as_float(d.get("credits_spent")),
            currency=as_str(d.get("currency")),
        )


@dataclass
class AccountBalance:
    """Current account balance."""

    credits: Optional[float]
    currency: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> AccountBalance:
        d = _require_dict(data, "account balance")
        return cls(
            credits=as_float(d.get("credits")),
            currency=as_str(d.get("currency")),
        )


# ---------------------------------------------------------------------------
# Jobs
# ---------------------------------------------------------------------------


@dataclass
class Job:
    """A translation job as returned by the job endpoints.

    Only ``job_id`` is guaranteed; the remaining fields depend on the
    endpoint and on the job's status (``body_tgt`` is absent until the
    translation is done, ``captcha_url`` only appears when reviewable, ...).
    """

    job_id: Optional[int]
    body_src: Optional[str] = None
    body_tgt: Optional[str] = None
    lc_src: Optional[str] = None
    lc_tgt: Optional[str] = None
    tier: Optional[str] = None
    status: Optional[str] = None
    credits: Optional[float] = None
    currency: Optional[str] = None
    unit_count: Optional[int] = None
    eta: Optional[int] = None
    ctime: Optional[int] = None
    auto_approve: Optional[int] = None
    slug: Optional[str] = None
    mt: Optional[int] = None
    callback_url: Optional[str] = None
    captcha_url: Optional[str] = None
    preview_url: Optional[str] = None
    custom_data: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> Job:
        d = _require_dict(data, "job")
        return cls(
            job_id=as_int(d.get("job_id")),
            body_src=as_str(d.get("body_src")),
            body_tgt=as_str(d.get("body_tgt")),
            lc_src=as_str(d.get("lc_src")),
            lc_tgt=as_str(d.get("lc_tgt")),
            tier=as_str(d.get("tier")),
            status=as_str(d.get("status")),
            credits=as_float(d.get("credits")),
            currency=as_str(d.get("currency")),
            unit_count=as_int(d.get("unit_count")),
            eta=as_int(d.get("eta")),
            ctime=as_int(d.get("ctime")),
            auto_approve=as_int(d.get("auto_approve")),
            slug=as_str(d.get("slug")),
            mt=as_int(d.get("mt")),
            callback_url=as_str(d.get("callback_url")),
            captcha_url=as_str(d.get("captcha_url")),
            preview_url=as_str(d.get("preview_url")),
            custom_data=as_str(d.get("custom_data")),
        )

    @classmethod
    def from_response(cls, data: Any) -> Job:
        """Build from a ``{"job": {...}}`` response body."""
        d = _require_dict(data, "job response")
        if "job" not in d:
            raise ResponseFormatError("Bad JSON: 'job' not in response")
        return cls.from_dict(d["job"])


@dataclass
class JobSummary:
    """Entry of the recent-jobs listing."""

    job_id: Optional[int]
    ctime: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> JobSummary:
        d = _require_dict(data, "job summary")
        return cls(job_id=as_int(d.get("job_id")), ctime=as_int(d.get("ctime")))


@dataclass
class Revision:
    """A single revision of a job's translation."""

    ctime: Optional[int]
    body_tgt: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> Revision:
        d = _require_dict(data, "revision")
        return cls(ctime=as_int(d.get("ctime")), body_tgt=as_str(d.get("body_tgt")))


@dataclass
class RevisionSummary:
    ctime: Optional[int]
    rev_id: Optional[int]

    @classmethod
    def from_dict(cls, data: Any) -> RevisionSummary:
        d = _require_dict(data, "revision summary")
        return cls(ctime=as_int(d.get("ctime")), rev_id=as_int(d.get("rev_id")))


@dataclass
class JobRevisions:
    """Revision listing for a job."""

    job_id: Optional[int]
    revisions: list[RevisionSummary] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> JobRevisions:
        d = _require_dict(data, "job revisions")
        revisions = _require_list(d.get("revisions") or [], "revisions")
        return cls(
            job_id=as_int(d.get("job_id")),
            revisions=[RevisionSummary.from_dict(r) for r in revisions],
        )


@dataclass
class Feedback:
    """Feedback left when a job was approved."""

    rating: Optional[float]
    for_translator: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> Feedback:
        d = _require_dict(data, "feedback")
        return cls(
            rating=as_float(d.get("rating")),
            for_translator=as_str(d.get("for_translator")),
        )


@dataclass
class Comment:
    """One entry of a job's comment thread."""

    author: Optional[str]
    body: Optional[str]
    ctime: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> Comment:
        d = _require_dict(data, "comment")
        return cls(
            author=as_str(d.get("author")),
            body=as_str(d.get("body")),
            ctime=as_int(d.get("ctime")),
        )


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


@dataclass
class LanguagePair:
    """A supported source/target pair at a given tier, with its unit price."""

    lc_src: Optional[str]
    lc_tgt: Optional[str]
    tier: Optional[str]
    unit_price: Optional[float]
    currency: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> LanguagePair:
        d = _require_dict(data, "language pair")
        return cls(
            lc_src=as_str(d.get("lc_src")),
            lc_tgt=as_str(d.get("lc_tgt")),
            tier=as_str(d.get("tier")),
            unit_price=as_float(d.get("unit_price")),
            currency=as_str(d.get("currency")),
        )


@dataclass
class Language:
    """A supported language.

    Attributes:
        language: English name of the language.
        lc: Language code.
        localized_name: Name of the language in that language.
        unit_type: "word" or "character".
    """

    language: Optional[str]
    lc: Optional[str]
    localized_name: Optional[str] = None
    unit_type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> Language:
        d = _require_dict(data, "language")
        return cls(
            language=as_str(d.get("language")),
            lc=as_str(d.get("lc")),
            localized_name=as_str(d.get("localized_name")),
            unit_type=as_str(d.get("unit_type")),
        )


@dataclass
class Quote:
    """Price and turnaround estimate for one job of a quote request."""

    unit_count: Optional[int]
    credits: Optional[float]
    eta: Optional[int] = None
    currency: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> Quote:
        d = _require_dict(data, "quote")
        return cls(
            unit_count=as_int(d.get("unit_count")),
            credits=as_float(d.get("credits")),
            eta=as_int(d.get("eta")),
            currency=as_str(d.get("currency")),
        )

    @classmethod
    def list_from_response(cls, data: Any) -> list[Quote]:
        """Decode the ``jobs`` member of a quote response.

        The service answers with either a list or an object keyed by the
        submitted job keys; both are accepted, object order is preserved.
        """
        d = _require_dict(data, "quote response")
        jobs = d.get("jobs") or []
        if isinstance(jobs, dict):
            jobs = list(jobs.values())
        return [cls.from_dict(j) for j in _require_list(jobs, "quote jobs")]


# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


@dataclass
class JobPayload:
    """A job to submit or quote.

    Attributes:
        body_src: Text to translate.
        lc_src: Source language code.
        lc_tgt: Target language code.
        tier: Quality tier ("machine", "standard", "pro", "ultra").
        force: Submit even if an identical job already exists (1).
        comment: Instructions for the translator.
        use_preferred: Restrict to preferred translators (1).
        callback_url: URL notified on status changes.
        auto_approve: Approve automatically once translated (1).
        custom_data: Opaque data echoed back on the job.
    """

    body_src: str
    lc_src: str
    lc_tgt: str
    tier: str
    force: Optional[int] = None
    comment: Optional[str] = None
    use_preferred: Optional[int] = None
    callback_url: Optional[str] = None
    auto_approve: Optional[int] = None
    custom_data: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.tier, Tier):
            self.tier = self.tier.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API payload, omitting unset optionals."""
        return _drop_none(asdict(self))


@dataclass
class JobArray:
    """A batch of jobs for submission or quoting.

    Attributes:
        jobs: Jobs in the batch.
        as_group: Ask for the jobs to be handled by one translator (1).
    """

    jobs: list[JobPayload]
    as_group: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"jobs": [job.to_dict() for job in self.jobs]}
        if self.as_group is not None:
            data["as_group"] = self.as_group
        return data


@dataclass
class ReviseAction:
    """Send a reviewable job back to the translator."""

    comment: str

    def to_dict(self) -> dict[str, Any]:
        return {"action": "revise", "comment": self.comment}


@dataclass
class ApproveAction:
    """Approve a reviewable job, optionally leaving feedback.

    Attributes:
        rating: 1 to 5.
        for_translator: Comment passed to the translator.
        for_gengo: Comment passed to Gengo staff.
        public: Allow Gengo to publish the feedback (1).
    """

    rating: Optional[int] = None
    for_translator: Optional[str] = None
    for_gengo: Optional[str] = None
    public: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {"action": "approve", **_drop_none(asdict(self))}


@dataclass
class RejectAction:
    """Reject a reviewable job.

    ``captcha`` must be the text shown at the job's ``captcha_url``.
    ``follow_up`` is "requeue" (default on the service side) or "cancel".
    """

    reason: str
    comment: str
    captcha: str
    follow_up: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {"action": "reject", **_drop_none(asdict(self))}
