"""FR entry rules."""

checklist = [
    "Passport issued within the last 10 years and valid 3 months after departure",
    "Proof of accommodation",
    "Sufficient means of subsistence",
]

rules = [
    {
        "citizenship": "US",
        "destination": "FR",
        "purpose": "tourism",
        "visa_type": "visa_free",
        "max_stay_days": 90,
        "requirements": [
            {
                "id": "schengen-90-180",
                "title": "90/180-day rule",
                "details": "Stays in the Schengen area are limited to 90 days in any 180-day period.",
                "category": "arrival",
                "source_urls": ["https://france-visas.gouv.fr/"],
            },
        ],
        "last_updated": "2025-02-03",
        "sources": ["https://france-visas.gouv.fr/"],
    },
    {
        "citizenship": "IN",
        "destination": "FR",
        "purpose": "tourism",
        "visa_type": "visa_required",
        "requirements": [
            {
                "id": "schengen-type-c",
                "title": "Schengen short-stay visa (type C)",
                "details": "Apply through France-Visas and book an appointment at the visa centre.",
                "category": "visa",
                "source_urls": ["https://france-visas.gouv.fr/"],
            },
            {
                "id": "schengen-insurance",
                "title": "Travel medical insurance",
                "details": "Coverage of at least EUR 30,000 valid in the whole Schengen area.",
                "category": "health",
            },
        ],
        "last_updated": "2025-02-03",
        "sources": ["https://france-visas.gouv.fr/"],
    },
]

# --- AUTO-GENERATED VISA MATRIX START ---
visa_matrix = {
    "GB": {"category": "visa_free", "max_stay_days": 90},
    "IN": {"category": "visa_required"},
    "JP": {"category": "visa_free", "max_stay_days": 90},
    "US": {"category": "visa_free", "max_stay_days": 90},
}
# --- AUTO-GENERATED VISA MATRIX END ---
