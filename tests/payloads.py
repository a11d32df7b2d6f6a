"""Request payload builders shared by the service and API tests."""


def scholarship_payload(**overrides):
    payload = {
        "title": "Fulbright Program",
        "description": "Graduate study in the United States",
        "amount": "$40,000",
        "deadline": "2030-06-15",
        "country": "United States",
        "tags": ["Fully Funded"],
    }
    payload.update(overrides)
    return payload


def article_payload(**overrides):
    payload = {
        "title": "Visa Interview Tips",
        "content": "Arrive early and bring your documents.",
        "summary": "How to prepare for a student visa interview",
        "author": "Sarah Johnson",
        "category": "Visa Tips",
    }
    payload.update(overrides)
    return payload
