"""TH entry rules."""

checklist = []

rules = [
    {
        "citizenship": "FR",
        "destination": "TH",
        "purpose": "tourism",
        "visa_type": "visa_free",
        "max_stay_days": 60,
        "requirements": [
            {
                "id": "th-onward-ticket",
                "title": "Onward ticket",
                "details": "Airlines may ask for proof of onward travel within the permitted stay.",
                "category": "arrival",
            },
            {
                "id": "th-funds",
                "title": "Proof of funds",
                "details": "Immigration can ask for 20,000 THB per person in cash or equivalent.",
                "category": "money",
            },
        ],
        "last_updated": "2024-07-15",
        "sources": ["https://www.thaiembassy.com/thailand-visa/thailand-visa-exemption"],
    },
]

# --- AUTO-GENERATED VISA MATRIX START ---
visa_matrix = {
    "FR": {"category": "visa_free", "max_stay_days": 60},
    "IN": {"category": "visa_on_arrival"},
    "US": {"category": "visa_free", "max_stay_days": 60},
}
# --- AUTO-GENERATED VISA MATRIX END ---
