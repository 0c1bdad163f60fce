"""US entry rules."""

checklist = [
    "Passport valid for the whole stay",
    "Approved ESTA or US visa before boarding",
    "Return or onward ticket",
]

_ESTA = {
    "id": "us-esta",
    "title": "ESTA authorization",
    "details": "Apply for ESTA online at least 72 hours before departure. Approval is valid for two years.",
    "category": "visa",
    "source_urls": ["https://esta.cbp.dhs.gov/"],
}

_PASSPORT = {
    "id": "us-epassport",
    "title": "Electronic passport",
    "details": "Visa Waiver Program travelers need an e-passport with an embedded chip.",
    "category": "passport",
    "source_urls": ["https://www.cbp.gov/travel/international-visitors/visa-waiver-program"],
}

rules = [
    {
        "citizenship": "FR",
        "destination": "US",
        "purpose": "tourism",
        "visa_type": "eta",
        "max_stay_days": 90,
        "requirements": [_ESTA, _PASSPORT],
        "last_updated": "2025-01-15",
        "sources": ["https://travel.state.gov/content/travel/en/us-visas/tourism-visit/visa-waiver-program.html"],
    },
    {
        "citizenship": "GB",
        "destination": "US",
        "purpose": "tourism",
        "visa_type": "eta",
        "max_stay_days": 90,
        "requirements": [_ESTA, _PASSPORT],
        "last_updated": "2025-01-15",
        "sources": ["https://travel.state.gov/content/travel/en/us-visas/tourism-visit/visa-waiver-program.html"],
    },
    {
        "citizenship": "FR",
        "destination": "US",
        "purpose": "transit",
        "visa_type": "eta",
        "requirements": [_ESTA],
        "last_updated": "2025-01-15",
        "sources": ["https://www.cbp.gov/travel/international-visitors/esta"],
    },
    {
        "citizenship": "IN",
        "destination": "US",
        "purpose": "tourism",
        "visa_type": "visa_required",
        "requirements": [
            {
                "id": "us-b1b2",
                "title": "B-1/B-2 visitor visa",
                "details": "Complete form DS-160 and attend an interview at a US embassy or consulate.",
                "category": "visa",
                "source_urls": ["https://travel.state.gov/content/travel/en/us-visas/tourism-visit/visitor.html"],
            },
        ],
        "last_updated": "2025-01-15",
        "sources": ["https://travel.state.gov/content/travel/en/us-visas/tourism-visit/visitor.html"],
    },
]

# --- AUTO-GENERATED VISA MATRIX START ---
visa_matrix = {
    "DE": {"category": "eta"},
    "FR": {"category": "eta"},
    "GB": {"category": "eta"},
    "IN": {"category": "visa_required"},
    "JP": {"category": "eta"},
    "MX": {"category": "visa_required"},
    "TH": {"category": "visa_required"},
}
# --- AUTO-GENERATED VISA MATRIX END ---
