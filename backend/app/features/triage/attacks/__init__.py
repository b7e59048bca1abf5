# backend/app/features/triage/attacks/__init__.py
"""Attack patterns for incident classification."""

from typing import List

from .base import AttackPattern
from .fallback import SuspiciousActivity
from .fraud import BankingFraud, SimSwapFraud
from .identity import AccountTakeover, IdentityTheft, SocialEngineering
from .malware import Adware, Keylogger, MalwareInfection, Ransomware, RemoteAccessTrojan, Spyware
from .phishing import ManInTheMiddle, Phishing, Smishing, Vishing

# Evaluation order. Later patterns consult earlier results: BankingFraud
# after SimSwapFraud, SocialEngineering after Vishing, Keylogger after
# Phishing, Vishing and ManInTheMiddle.
ATTACK_PATTERNS: List[AttackPattern] = [
    Ransomware(),
    RemoteAccessTrojan(),
    SimSwapFraud(),
    Vishing(),
    Phishing(),
    Smishing(),
    Spyware(),
    ManInTheMiddle(),
    IdentityTheft(),
    AccountTakeover(),
    MalwareInfection(),
    BankingFraud(),
    SocialEngineering(),
    Adware(),
    Keylogger(),
]

FALLBACK_PATTERN: AttackPattern = SuspiciousActivity()

__all__ = [
    "AttackPattern",
    "ATTACK_PATTERNS",
    "FALLBACK_PATTERN",
    "AccountTakeover",
    "Adware",
    "BankingFraud",
    "IdentityTheft",
    "Keylogger",
    "MalwareInfection",
    "ManInTheMiddle",
    "Phishing",
    "Ransomware",
    "RemoteAccessTrojan",
    "SimSwapFraud",
    "Smishing",
    "SocialEngineering",
    "Spyware",
    "SuspiciousActivity",
    "Vishing",
]
