"""JP entry rules."""

checklist = [
    "Passport valid for the whole stay",
    "Visit Japan Web registration for immigration and customs",
]

rules = [
    {
        "citizenship": "US",
        "destination": "JP",
        "purpose": "tourism",
        "visa_type": "visa_free",
        "max_stay_days": 90,
        "requirements": [
            {
                "id": "jp-visit-japan-web",
                "title": "Visit Japan Web",
                "details": "Register arrival details online to get immigration and customs QR codes.",
                "category": "arrival",
                "source_urls": ["https://www.vjw.digital.go.jp/"],
            },
        ],
        "last_updated": "2024-11-20",
        "sources": ["https://www.mofa.go.jp/j_info/visit/visa/short/novisa.html"],
    },
]

# --- AUTO-GENERATED VISA MATRIX START ---
visa_matrix = {
    "FR": {"category": "visa_free", "max_stay_days": 90},
    "GB": {"category": "visa_free", "max_stay_days": 90},
    "IN": {"category": "e_visa"},
    "US": {"category": "visa_free", "max_stay_days": 90},
}
# --- AUTO-GENERATED VISA MATRIX END ---
