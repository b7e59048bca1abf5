# backend/app/features/triage/contacts.py
"""Official Indian reporting destinations and victim resources."""

from typing import List

from .models import OfficialResource, ReportingContact

CERT_IN = ReportingContact(name="CERT-In", url="https://www.cert-in.org.in/")
CYBER_CRIME_PORTAL = ReportingContact(
    name="National Cyber Crime Portal",
    url="https://cybercrime.gov.in/",
)
HELPLINE_1930 = ReportingContact(name="Cyber Crime Helpline 1930", url="tel:1930")
RBI = ReportingContact(name="RBI Sachet Portal", url="https://sachet.rbi.org.in/")
LOCAL_POLICE = ReportingContact(name="Local Police / FIR", url="https://cybercrime.gov.in/")

REPORTING_CONTACTS: List[ReportingContact] = [
    CERT_IN,
    CYBER_CRIME_PORTAL,
    HELPLINE_1930,
    RBI,
    LOCAL_POLICE,
]

OFFICIAL_RESOURCES: List[OfficialResource] = [
    OfficialResource(
        title="National Cyber Crime Reporting Portal",
        description=(
            "The official Government of India portal for reporting all types "
            "of cyber crimes online."
        ),
        url="https://cybercrime.gov.in",
        tag="Primary",
    ),
    OfficialResource(
        title="Cyber Crime Helpline 1930",
        description=(
            "24/7 toll-free helpline for reporting financial frauds and cyber "
            "crimes. Call immediately if money was stolen."
        ),
        url="tel:1930",
        tag="Emergency",
    ),
    OfficialResource(
        title="CERT-In (Indian Computer Emergency Response Team)",
        description=(
            "National nodal agency for responding to computer security "
            "incidents. Report malware, vulnerabilities, and hacking."
        ),
        url="https://cert-in.org.in",
        tag="Technical",
    ),
    OfficialResource(
        title="RBI Ombudsman",
        description=(
            "For complaints related to banking, UPI, wallet, or credit card "
            "fraud, file with the Reserve Bank of India."
        ),
        url="https://cms.rbi.org.in",
        tag="Financial",
    ),
    OfficialResource(
        title="State Cyber Crime Cells",
        description=(
            "Each Indian state has a dedicated cyber crime cell. Visit your "
            "nearest police station or state cyber cell."
        ),
        url="https://cybercrime.gov.in",
        tag="Local",
    ),
    OfficialResource(
        title="IT Act, 2000 Legal Reference",
        description=(
            "Reference the Information Technology Act for understanding cyber "
            "crime laws and penalties in India."
        ),
        url="https://www.meity.gov.in/content/information-technology-act",
        tag="Legal",
    ),
]
