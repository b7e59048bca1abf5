#!/usr/bin/env python3
"""
Incident Scenario Smoke Suite

Posts known incident descriptions to a running CyberGuard API and checks
that each one is classified and planned as expected:
- expected threats are present (and forbidden ones absent)
- severity of key threats
- expected action plan items per bucket

Usage:
    python scripts/check_scenarios.py http://localhost:8000
    python scripts/check_scenarios.py https://cyberguard.example.com --verbose
"""

import argparse
import json
import sys
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

import httpx


class CheckStatus(Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    ERROR = "ERROR"


@dataclass
class CheckResult:
    name: str
    status: CheckStatus
    attacks: List[str]
    latency_ms: int
    notes: List[str] = field(default_factory=list)


SCENARIOS = [
    # ===== FINANCIAL =====
    {
        "name": "SIM swap after OTP shared on banking app",
        "category": "financial",
        "answers": {
            "platform": "banking",
            "sharedOTP": "Yes",
            "impacts": ["Lost money or unauthorized transactions"],
        },
        "expect_attacks": {"SIM Swap Fraud": "Critical"},
        "forbid_attacks": ["UPI / Banking Fraud"],
        "expect_plan": {"now": ["now-bank", "now-telecom"]},
    },
    {
        "name": "UPI fraud without OTP",
        "category": "financial",
        "answers": {
            "platform": "banking",
            "sharedOTP": "No",
            "impacts": ["Lost money or unauthorized transactions"],
        },
        "expect_attacks": {"UPI / Banking Fraud": "Medium"},
        "forbid_attacks": ["SIM Swap Fraud"],
        "expect_plan": {"now": ["now-bank"], "week": ["week-monitor"]},
    },
    {
        "name": "Bank details given to a caller",
        "category": "financial",
        "answers": {
            "platform": "phone",
            "personalInfoShared": ["Bank account number", "Full name"],
        },
        "expect_attacks": {"Vishing (Voice Phishing)": "High"},
        "forbid_attacks": ["Social Engineering", "Keylogger"],
        "expect_plan": {"now": ["now-passwords"]},
    },
    # ===== CREDENTIALS =====
    {
        "name": "Password typed into a phishing page",
        "category": "credentials",
        "answers": {
            "platform": "email",
            "clickedSuspiciousLink": "Yes",
            "personalInfoShared": ["Username and password"],
        },
        "expect_attacks": {"Phishing": "High"},
        "forbid_attacks": ["Keylogger"],
        "expect_plan": {"today": ["today-sessions"], "week": ["week-breach"]},
    },
    {
        "name": "Credentials leaked with no link clicked",
        "category": "credentials",
        "answers": {
            "platform": "website",
            "clickedSuspiciousLink": "No",
            "personalInfoShared": ["Username and password"],
        },
        "expect_attacks": {"Keylogger": "Low"},
        "expect_plan": {"today": ["today-antivirus"]},
    },
    # ===== DEVICE =====
    {
        "name": "Screen controlled remotely",
        "category": "device",
        "answers": {"suspiciousActivities": ["My screen was being controlled remotely"]},
        "expect_attacks": {"Remote Access Trojan (RAT)": "Critical"},
        "expect_plan": {"now": ["now-disconnect"]},
    },
    {
        "name": "Ransom note on screen",
        "category": "device",
        "answers": {"suspiciousActivities": ["My files got encrypted or I see a ransom message"]},
        "expect_attacks": {"Ransomware": "Critical"},
        "expect_plan": {"now": ["now-ransom"]},
    },
    # ===== FALLBACK =====
    {
        "name": "Nothing recognisable",
        "category": "fallback",
        "answers": {},
        "expect_attacks": {"Suspicious Activity Detected": "Medium"},
        "expect_plan": {
            "today": ["today-evidence", "today-complaint"],
            "week": ["week-2fa", "week-update", "week-review"],
        },
    },
]


def analyze(client: httpx.Client, base_url: str, answers: dict) -> tuple[dict, int]:
    """Post answers to the analyze endpoint and return response with latency."""
    start = time.time()
    try:
        response = client.post(
            f"{base_url}/api/v1/triage/analyze",
            json=answers,
            timeout=30.0,
        )
        latency = int((time.time() - start) * 1000)

        if response.status_code == 200:
            return response.json(), latency
        else:
            return {"error": f"HTTP {response.status_code}: {response.text[:200]}"}, latency
    except httpx.HTTPError as e:
        latency = int((time.time() - start) * 1000)
        return {"error": str(e)}, latency


def evaluate(scenario: dict, response: dict) -> tuple[CheckStatus, List[str]]:
    """Compare a response with the scenario's expectations."""
    if "error" in response:
        return CheckStatus.ERROR, [response["error"]]

    notes = []
    severities: Dict[str, str] = {a["name"]: a["severity"] for a in response.get("attacks", [])}

    for name, severity in scenario.get("expect_attacks", {}).items():
        if name not in severities:
            notes.append(f"missing attack '{name}'")
        elif severities[name] != severity:
            notes.append(f"'{name}' is {severities[name]}, expected {severity}")

    for name in scenario.get("forbid_attacks", []):
        if name in severities:
            notes.append(f"unexpected attack '{name}'")

    plan = response.get("plan", {})
    for bucket, ids in scenario.get("expect_plan", {}).items():
        present = {item["id"] for item in plan.get(bucket, [])}
        for item_id in ids:
            if item_id not in present:
                notes.append(f"missing {bucket} item '{item_id}'")

    return (CheckStatus.FAIL if notes else CheckStatus.PASS), notes


def run_checks(base_url: str, verbose: bool = False) -> list[CheckResult]:
    """Run all scenarios against the API."""
    results = []

    with httpx.Client() as client:
        # Verify endpoint is reachable
        try:
            health = client.get(f"{base_url}/health", timeout=10.0)
            if health.status_code != 200:
                print(f"ERROR: Health check failed: {health.status_code}")
                sys.exit(1)
        except httpx.HTTPError as e:
            print(f"ERROR: Cannot reach {base_url}: {e}")
            sys.exit(1)

        print(f"\n{'='*60}")
        print("Incident Scenario Smoke Suite")
        print(f"Target: {base_url}")
        print(f"{'='*60}\n")

        for scenario in SCENARIOS:
            response, latency = analyze(client, base_url, scenario["answers"])
            status, notes = evaluate(scenario, response)

            result = CheckResult(
                name=scenario["name"],
                status=status,
                attacks=[a["name"] for a in response.get("attacks", [])],
                latency_ms=latency,
                notes=notes,
            )
            results.append(result)

            status_icon = {
                CheckStatus.PASS: "\033[92m✓\033[0m",
                CheckStatus.FAIL: "\033[91m✗\033[0m",
                CheckStatus.ERROR: "\033[93m!\033[0m",
            }[status]

            print(f"{status_icon} [{status.value:5}] {scenario['name']}")
            if verbose or status != CheckStatus.PASS:
                print(f"   Attacks: {result.attacks}")
                for note in notes:
                    print(f"   Reason:  {note}")
                print(f"   Latency: {latency}ms")
                print()

    return results


def print_summary(results: list[CheckResult]):
    """Print check summary."""
    print(f"\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")

    passed = sum(1 for r in results if r.status == CheckStatus.PASS)
    failed = sum(1 for r in results if r.status == CheckStatus.FAIL)
    errors = sum(1 for r in results if r.status == CheckStatus.ERROR)

    print(f"\nTotal Scenarios: {len(results)}")
    print(f"\033[92mPassed: {passed}\033[0m")
    print(f"\033[91mFailed: {failed}\033[0m")
    print(f"\033[93mErrors: {errors}\033[0m")

    print("\n--- By Category ---")
    categories: Dict[str, List[CheckResult]] = {}
    for r in results:
        cat = next(s["category"] for s in SCENARIOS if s["name"] == r.name)
        categories.setdefault(cat, []).append(r)

    for cat, cat_results in categories.items():
        ok = sum(1 for r in cat_results if r.status == CheckStatus.PASS)
        print(f"  {cat:12}: {ok}/{len(cat_results)} passed")

    print()


def main():
    parser = argparse.ArgumentParser(description="Check incident scenarios against a CyberGuard API")
    parser.add_argument("url", help="Base URL of the API (e.g., http://localhost:8000)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show detailed output")
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    args = parser.parse_args()

    results = run_checks(args.url.rstrip("/"), args.verbose)

    if args.json:
        output = [
            {
                "name": r.name,
                "status": r.status.value,
                "attacks": r.attacks,
                "latency_ms": r.latency_ms,
                "notes": r.notes,
            }
            for r in results
        ]
        print(json.dumps(output, indent=2))
    else:
        print_summary(results)

    if any(r.status != CheckStatus.PASS for r in results):
        sys.exit(1)


if __name__ == "__main__":
    main()
