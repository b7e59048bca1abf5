"""Pytest fixtures for CyberGuard tests."""

import pytest

from backend.app.features.triage.models import AnswerSet


@pytest.fixture
def empty_answers() -> AnswerSet:
    """Nothing answered at all."""
    return AnswerSet()


@pytest.fixture
def sim_swap_answers() -> AnswerSet:
    """OTP shared on a banking app followed by money loss."""
    return AnswerSet(
        platform="banking",
        shared_otp="Yes",
        impacts=("Lost money or unauthorized transactions",),
    )


@pytest.fixture
def phishing_answers() -> AnswerSet:
    """Credentials typed in after clicking an email link."""
    return AnswerSet(
        platform="email",
        clicked_suspicious_link="Yes",
        personal_info_shared=("Username and password",),
    )


@pytest.fixture
def rat_answers() -> AnswerSet:
    return AnswerSet(suspicious_activities=("My screen was being controlled remotely",))


@pytest.fixture
def complete_answers() -> AnswerSet:
    """A fully answered questionnaire using only questionnaire labels."""
    return AnswerSet(
        platform="android",
        suspicious_activities=("Unknown apps appeared", "Device became slow or hot"),
        device_permissions=("Storage/Files", "Accessibility service"),
        personal_info_shared=(),
        account_access_given=(),
        impacts=("Nothing visible yet",),
        when_happened="Yesterday",
        clicked_suspicious_link="No",
        downloaded_file="Yes",
        shared_otp="No",
        allowed_remote_access="No",
        concern_level=3,
    )


@pytest.fixture
def complete_payload() -> dict:
    """Form payload in camelCase, as posted by the questionnaire UI."""
    return {
        "platform": "banking",
        "suspiciousActivities": ["Money was deducted without my action"],
        "devicePermissions": [],
        "personalInfoShared": ["OTP"],
        "accountAccessGiven": [],
        "impacts": ["Lost money or unauthorized transactions"],
        "whenHappened": "Today",
        "clickedSuspiciousLink": "No",
        "downloadedFile": "No",
        "sharedOTP": "Yes",
        "allowedRemoteAccess": "No",
        "concernLevel": 5,
    }
