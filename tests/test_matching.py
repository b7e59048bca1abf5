"""Tests for fragment predicates."""

from backend.app.features.triage.attacks import Phishing, SimSwapFraud, Smishing
from backend.app.features.triage.matching import (
    already_detected,
    any_financial_info_shared,
    contains_fragment,
    credentials_shared,
    has_activity,
    has_attack,
)
from backend.app.features.triage.models import AnswerSet


class TestContainsFragment:
    """Tests for contains_fragment."""

    def test_substring_match(self) -> None:
        """Test that a fragment matches anywhere inside a label."""
        labels = ["My files got encrypted or I see a ransom message"]
        assert contains_fragment(labels, "ransom message") is True

    def test_case_insensitive(self) -> None:
        """Test that case is ignored on both sides."""
        assert contains_fragment(["Card number/CVV/expiry"], "CARD NUMBER") is True
        assert contains_fragment(["CARD NUMBER"], "card number") is True

    def test_any_of_several_fragments(self) -> None:
        """Test that any fragment is enough."""
        assert contains_fragment(["OTP"], "bank account", "otp") is True

    def test_no_match(self) -> None:
        """Test that unrelated labels do not match."""
        assert contains_fragment(["Full name"], "otp", "card number") is False

    def test_empty_labels(self) -> None:
        """Test that an empty field never matches."""
        assert contains_fragment([], "anything") is False


class TestAnswerPredicates:
    """Tests for predicates over answer fields."""

    def test_has_activity_uses_only_activities(self) -> None:
        """Test that other fields are not consulted."""
        answers = AnswerSet(impacts=("Unknown logins detected",))
        assert has_activity(answers, "unknown logins") is False

    def test_credentials_shared(self) -> None:
        """Test each credential kind."""
        for label in ("Username and password", "OTP", "Card number/CVV/expiry", "Bank account number"):
            assert credentials_shared(AnswerSet(personal_info_shared=(label,))) is True

    def test_credentials_not_shared(self) -> None:
        """Test that identity documents are not login credentials."""
        answers = AnswerSet(personal_info_shared=("Full name", "PAN Card"))
        assert credentials_shared(answers) is False

    def test_financial_info_via_impact(self) -> None:
        """Test that money loss counts even with nothing shared."""
        answers = AnswerSet(impacts=("Lost money or unauthorized transactions",))
        assert any_financial_info_shared(answers) is True

    def test_financial_info_ignores_passwords(self) -> None:
        """Test that a password alone is not financial information."""
        answers = AnswerSet(personal_info_shared=("Username and password",))
        assert any_financial_info_shared(answers) is False


class TestAttackPredicates:
    """Tests for predicates over detected attacks."""

    def test_has_attack_matches_name_fragment(self) -> None:
        """Test that a fragment of the name is enough."""
        attacks = [SimSwapFraud().to_attack()]
        assert has_attack(attacks, "sim swap") is True

    def test_has_attack_fragment_spans_related_names(self) -> None:
        """Test that "phishing" also matches SMS phishing."""
        attacks = [Smishing().to_attack()]
        assert has_attack(attacks, "phishing") is True

    def test_already_detected_is_exact(self) -> None:
        """Test that exclusivity checks need the full name."""
        attacks = [Smishing().to_attack()]
        assert already_detected(attacks, Phishing.name) is False
        assert already_detected(attacks, Smishing.name) is True

    def test_empty_attacks(self) -> None:
        """Test that nothing is detected in an empty list."""
        assert has_attack([], "phishing") is False
        assert already_detected([], Phishing.name) is False
