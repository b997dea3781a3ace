# SPDX-License-Identifier: Apache-2.0
"""Tests for request and response models."""

import pytest

from gengo_client.envelope import parse_envelope
from gengo_client.errors import ResponseFormatError
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
    Language,
    LanguagePair,
    Quote,
    RejectAction,
    ReviseAction,
    Tier,
)


class TestResponseModels:
    """Tests for from_dict decoding."""

    def test_account_stats_string_credits(self) -> None:
        """credits_spent arrives as a string and is decoded as float."""
        stats = AccountStats.from_dict(
            {"user_since": 1234567890, "credits_spent": "1023.31", "currency": "USD"}
        )
        assert stats.user_since == 1234567890
        assert stats.credits_spent == pytest.approx(1023.31)
        assert stats.currency == "USD"

    def test_account_balance(self) -> None:
        balance = AccountBalance.from_dict({"credits": "25.32", "currency": "USD"})
        assert balance.credits == pytest.approx(25.32)

    def test_account_balance_not_object(self) -> None:
        with pytest.raises(ResponseFormatError):
            AccountBalance.from_dict(["25.32"])

    def test_job_mixed_types(self) -> None:
        """Numeric fields are accepted both as numbers and strings."""
        job = Job.from_dict(
            {
                "job_id": "384985",
                "body_src": "Hello",
                "lc_src": "en",
                "lc_tgt": "ja",
                "tier": "standard",
                "status": "available",
                "credits": "0.05",
                "unit_count": "1",
                "eta": 25056,
                "ctime": 1313475693,
                "auto_approve": "0",
                "slug": "greeting",
            }
        )
        assert job.job_id == 384985
        assert job.credits == pytest.approx(0.05)
        assert job.unit_count == 1
        assert job.eta == 25056
        assert job.auto_approve == 0
        assert job.body_tgt is None
        assert job.slug == "greeting"

    def test_account_balance_huge_credits(self) -> None:
        """Out-of-range credits raise ResponseFormatError, not OverflowError."""
        data = parse_envelope(
            b'{"opstat": "ok", "response": {"credits": ' + b"9" * 400 + b"}}"
        )
        with pytest.raises(ResponseFormatError):
            AccountBalance.from_dict(data)

    def test_job_boolean_flags(self) -> None:
        """auto_approve and mt sent as JSON booleans decode to 1/0."""
        job = Job.from_dict({"job_id": "1", "auto_approve": False, "mt": True})
        assert job.auto_approve == 0
        assert job.mt == 1

    def test_job_from_response(self) -> None:
        job = Job.from_response({"job": {"job_id": 1, "status": "approved"}})
        assert job.job_id == 1
        assert job.status == "approved"

    def test_job_from_response_missing_job(self) -> None:
        with pytest.raises(ResponseFormatError):
            Job.from_response({"jobs": []})

    def test_job_bad_number(self) -> None:
        with pytest.raises(ResponseFormatError):
            Job.from_dict({"job_id": "not-a-number"})

    def test_job_revisions(self) -> None:
        revisions = JobRevisions.from_dict(
            {
                "job_id": "123",
                "revisions": [
                    {"ctime": 1313475693, "rev_id": "1"},
                    {"ctime": 1313475700, "rev_id": "2"},
                ],
            }
        )
        assert revisions.job_id == 123
        assert [r.rev_id for r in revisions.revisions] == [1, 2]

    def test_feedback(self) -> None:
        feedback = Feedback.from_dict({"rating": "3.0", "for_translator": "Thanks"})
        assert feedback.rating == 3.0
        assert feedback.for_translator == "Thanks"

    def test_comment(self) -> None:
        comment = Comment.from_dict({"author": "customer", "body": "Hi", "ctime": 1})
        assert comment == Comment(author="customer", body="Hi", ctime=1)

    def test_language_pair(self) -> None:
        pair = LanguagePair.from_dict(
            {"lc_src": "en", "lc_tgt": "ja", "tier": "pro", "unit_price": "0.1200", "currency": "USD"}
        )
        assert pair.unit_price == pytest.approx(0.12)

    def test_language(self) -> None:
        language = Language.from_dict(
            {"language": "Japanese", "lc": "ja", "localized_name": "日本語", "unit_type": "character"}
        )
        assert language.localized_name == "日本語"
        assert language.unit_type == "character"

    def test_quote_list(self) -> None:
        quotes = Quote.list_from_response(
            {"jobs": [{"unit_count": 2, "credits": 0.1, "eta": 60, "currency": "USD"}]}
        )
        assert len(quotes) == 1
        assert quotes[0].credits == pytest.approx(0.1)

    def test_quote_keyed_object(self) -> None:
        """Quotes keyed by job key keep submission order."""
        quotes = Quote.list_from_response(
            {
                "jobs": {
                    "job_1": {"unit_count": "2", "credits": "0.10"},
                    "job_2": {"unit_count": "5", "credits": "0.25"},
                }
            }
        )
        assert [q.unit_count for q in quotes] == [2, 5]


class TestRequestModels:
    """Tests for to_dict serialization."""

    def test_job_payload_required_only(self) -> None:
        payload = JobPayload(body_src="Hello", lc_src="en", lc_tgt="ja", tier="standard")
        assert payload.to_dict() == {
            "body_src": "Hello",
            "lc_src": "en",
            "lc_tgt": "ja",
            "tier": "standard",
        }

    def test_job_payload_optionals(self) -> None:
        payload = JobPayload(
            body_src="Hello",
            lc_src="en",
            lc_tgt="ja",
            tier=Tier.PRO,
            force=1,
            comment="Be formal",
            callback_url="http://example.test/cb",
            auto_approve=1,
            custom_data="order-7",
        )
        data = payload.to_dict()
        assert data["tier"] == "pro"
        assert data["force"] == 1
        assert data["comment"] == "Be formal"
        assert data["custom_data"] == "order-7"
        assert "use_preferred" not in data

    def test_job_array(self) -> None:
        jobs = [
            JobPayload(body_src="One", lc_src="en", lc_tgt="ja", tier="machine"),
            JobPayload(body_src="Two", lc_src="en", lc_tgt="fr", tier="machine"),
        ]
        assert "as_group" not in JobArray(jobs=jobs).to_dict()
        data = JobArray(jobs=jobs, as_group=1).to_dict()
        assert data["as_group"] == 1
        assert [j["body_src"] for j in data["jobs"]] == ["One", "Two"]

    def test_revise_action(self) -> None:
        assert ReviseAction(comment="Fix typo").to_dict() == {
            "action": "revise",
            "comment": "Fix typo",
        }

    def test_approve_action_empty(self) -> None:
        assert ApproveAction().to_dict() == {"action": "approve"}

    def test_approve_action_feedback(self) -> None:
        data = ApproveAction(rating=5, for_translator="Great", for_gengo="ok", public=1).to_dict()
        assert data == {
            "action": "approve",
            "rating": 5,
            "for_translator": "Great",
            "for_gengo": "ok",
            "public": 1,
        }

    def test_reject_action(self) -> None:
        data = RejectAction(reason="quality", comment="Wrong", captcha="AB12").to_dict()
        assert data == {
            "action": "reject",
            "reason": "quality",
            "comment": "Wrong",
            "captcha": "AB12",
        }
        data = RejectAction(
            reason="quality", comment="Wrong", captcha="AB12", follow_up="cancel"
        ).to_dict()
        assert data["follow_up"] == "cancel"
