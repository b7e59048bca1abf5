# backend/app/features/triage/vocabulary.py
"""Questionnaire steps and the option labels offered at each step.

The classifier matches fragments of these labels, so editing a label here
can silently disable a pattern. Keep the fragments in ``attacks`` and
``action_plan`` in sync.
"""

from typing import Callable, Dict, List, NamedTuple, Tuple

from .models import AnswerSet

PLATFORMS: Dict[str, str] = {
    "website": "Website / Web App",
    "android": "Mobile App (Android)",
    "ios": "Mobile App (iOS)",
    "desktop": "Desktop Application",
    "email": "Email",
    "messaging": "SMS / WhatsApp / Telegram",
    "phone": "Phone Call",
    "social": "Social Media",
    "banking": "Online Banking / UPI App",
    "qr": "QR Code Scan",
    "wifi": "Public Wi-Fi",
    "unsure": "I'm not sure",
}

SUSPICIOUS_ACTIVITIES: Tuple[str, ...] = (
    "App asked for unusual permissions",
    "Device became slow or hot",
    "Unknown apps appeared",
    "Messages sent from my account that I didn't send",
    "My account password stopped working",
    "I was redirected to a different website",
    "Constant pop-ups appeared",
    "Webcam or mic turned on by itself",
    "My files got encrypted or I see a ransom message",
    "Money was deducted without my action",
    "My personal info appeared online",
    "Someone knew things only I should know",
    "My screen was being controlled remotely",
    "Unknown logins detected",
    "Other",
)

DEVICE_PERMISSIONS: Tuple[str, ...] = (
    "Camera",
    "Microphone",
    "Location/GPS",
    "Contacts",
    "Call logs or SMS",
    "Storage/Files",
    "Screen recording",
    "Accessibility service",
    "Device Administrator rights",
    "Install unknown apps",
)

PERSONAL_INFO: Tuple[str, ...] = (
    "Full name",
    "Date of birth",
    "Aadhaar/National ID",
    "PAN Card",
    "Bank account number",
    "Card number/CVV/expiry",
    "OTP",
    "Username and password",
    "Passport or Driving license",
)

ACCOUNT_ACCESS: Tuple[str, ...] = (
    "Login via Google or Facebook",
    "Email account access",
    "Social media access",
    "Cloud storage access",
)

IMPACTS: Tuple[str, ...] = (
    "Nothing visible yet",
    "Lost money or unauthorized transactions",
    "Account was locked or taken over",
    "Personal data was leaked",
    "Received threats or blackmail",
    "My contacts were spammed",
    "Device stopped working",
    "Files are inaccessible or encrypted",
    "Getting strange targeted ads",
    "Receiving spam messages now",
    "A fake profile was made using my identity",
    "Not sure",
)

WHEN_OPTIONS: Tuple[str, ...] = ("Today", "Yesterday", "This week", "This month", "Longer ago")
YES_NO_NOT_SURE: Tuple[str, ...] = ("Yes", "No", "Not sure")
YES_NO: Tuple[str, ...] = ("Yes", "No")
CONCERN_LEVELS: Dict[int, str] = {
    1: "Not very concerned",
    2: "Slightly concerned",
    3: "Moderately concerned",
    4: "Very concerned",
    5: "Extremely concerned",
}

# answer field -> allowed labels, for strict submissions
MULTI_SELECT_FIELDS: Dict[str, Tuple[str, ...]] = {
    "suspicious_activities": SUSPICIOUS_ACTIVITIES,
    "device_permissions": DEVICE_PERMISSIONS,
    "personal_info_shared": PERSONAL_INFO,
    "account_access_given": ACCOUNT_ACCESS,
    "impacts": IMPACTS,
}

SINGLE_SELECT_FIELDS: Dict[str, Tuple[str, ...]] = {
    "platform": tuple(PLATFORMS),
    "when_happened": WHEN_OPTIONS,
    "clicked_suspicious_link": YES_NO_NOT_SURE,
    "downloaded_file": YES_NO_NOT_SURE,
    "shared_otp": YES_NO,
    "allowed_remote_access": YES_NO,
}


class QuestionnaireStep(NamedTuple):
    """One page of the questionnaire."""

    key: str
    label: str
    title: str
    description: str
    fields: Tuple[str, ...]
    is_complete: Callable[[AnswerSet], bool]


def _timeline_complete(answers: AnswerSet) -> bool:
    return (
        answers.when_happened != ""
        and answers.clicked_suspicious_link != ""
        and answers.downloaded_file != ""
        and answers.shared_otp != ""
        and answers.allowed_remote_access != ""
        and answers.concern_level > 0
    )


STEPS: Tuple[QuestionnaireStep, ...] = (
    QuestionnaireStep(
        key="platform",
        label="Platform",
        title="Where did this happen?",
        description="Tell us which platform or channel the incident occurred on.",
        fields=("platform",),
        is_complete=lambda a: a.platform != "",
    ),
    QuestionnaireStep(
        key="activity",
        label="Activity",
        title="What suspicious activity did you notice?",
        description="Select all suspicious behaviors you experienced.",
        fields=("suspicious_activities",),
        is_complete=lambda a: len(a.suspicious_activities) > 0,
    ),
    QuestionnaireStep(
        key="permissions",
        label="Permissions",
        title="What permissions were requested or did you allow?",
        description="Select any permissions or information that were requested or shared.",
        fields=("device_permissions", "personal_info_shared", "account_access_given"),
        # optional: the user may not have shared anything
        is_complete=lambda a: True,
    ),
    QuestionnaireStep(
        key="impact",
        label="Impact",
        title="What was the impact?",
        description="What consequences have you noticed so far?",
        fields=("impacts",),
        is_complete=lambda a: len(a.impacts) > 0,
    ),
    QuestionnaireStep(
        key="timeline",
        label="Timeline",
        title="Timeline and context",
        description="Help us understand the timeline and circumstances.",
        fields=(
            "when_happened",
            "clicked_suspicious_link",
            "downloaded_file",
            "shared_otp",
            "allowed_remote_access",
            "concern_level",
        ),
        is_complete=_timeline_complete,
    ),
)


def missing_steps(answers: AnswerSet) -> List[QuestionnaireStep]:
    """Steps that would still block the user from moving on."""
    return [step for step in STEPS if not step.is_complete(answers)]


def unknown_labels(answers: AnswerSet) -> Dict[str, List[str]]:
    """Values outside the questionnaire vocabulary, keyed by answer field.

    Blank single-select values count as unanswered, not unknown.
    """
    problems: Dict[str, List[str]] = {}
    for field, allowed in MULTI_SELECT_FIELDS.items():
        bad = [label for label in getattr(answers, field) if label not in allowed]
        if bad:
            problems[field] = bad
    for field, allowed in SINGLE_SELECT_FIELDS.items():
        value = getattr(answers, field)
        if value and value not in allowed:
            problems[field] = [value]
    if answers.concern_level != 0 and answers.concern_level not in CONCERN_LEVELS:
        problems["concern_level"] = [str(answers.concern_level)]
    return problems


def questionnaire() -> Dict[str, object]:
    """Serializable description of the steps and options."""
    return {
        "steps": [
            {
                "key": step.key,
                "label": step.label,
                "title": step.title,
                "description": step.description,
                "fields": list(step.fields),
            }
            for step in STEPS
        ],
        "options": {
            "platform": [{"value": code, "label": label} for code, label in PLATFORMS.items()],
            "suspicious_activities": list(SUSPICIOUS_ACTIVITIES),
            "device_permissions": list(DEVICE_PERMISSIONS),
            "personal_info_shared": list(PERSONAL_INFO),
            "account_access_given": list(ACCOUNT_ACCESS),
            "impacts": list(IMPACTS),
            "when_happened": list(WHEN_OPTIONS),
            "clicked_suspicious_link": list(YES_NO_NOT_SURE),
            "downloaded_file": list(YES_NO_NOT_SURE),
            "shared_otp": list(YES_NO),
            "allowed_remote_access": list(YES_NO),
            "concern_level": [
                {"value": level, "label": label} for level, label in CONCERN_LEVELS.items()
            ],
        },
    }
