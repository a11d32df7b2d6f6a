"""Shared fixtures for the catalog test suite."""

import pytest
from django.contrib.auth.models import User
from django.core.cache import cache
from rest_framework.test import APIClient

from catalog.auth import AdminSession, issue_tokens
from catalog.models import Article, Country, News, Scholarship, University


@pytest.fixture(autouse=True)
def clear_throttle_cache():
    """Throttle counters live in the cache; start every test from zero."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(username="editor", email="editor@example.com", password="s3cret-pass", is_staff=True)


@pytest.fixture
def regular_user(db):
    return User.objects.create_user(username="reader", email="reader@example.com", password="s3cret-pass")


@pytest.fixture
def admin_session(admin_user):
    return AdminSession(admin_user)


@pytest.fixture
def admin_client(api_client, admin_user):
    token = issue_tokens(admin_user)["access"]
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return api_client


@pytest.fixture
def reader_client(api_client, regular_user):
    token = issue_tokens(regular_user)["access"]
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return api_client


@pytest.fixture
def catalog_content(db):
    """A small catalog with one or two records per collection."""
    return {
        "scholarships": [
            Scholarship.objects.create(
                title="Fulbright Program",
                description="Graduate study in the United States",
                amount="$40,000",
                deadline="2030-06-15",
                country="United States",
                tags=["Fully Funded", "Merit-Based"],
                slug="fulbright-program",
            ),
            Scholarship.objects.create(
                title="Erasmus Grant",
                description="Exchange semesters across Europe",
                amount="€1,200",
                deadline="2030-09-01",
                country="Germany",
                tags=["Partial Aid"],
                slug="erasmus-grant",
            ),
        ],
        "articles": [
            Article.objects.create(
                title="Budgeting Abroad",
                content="Track rent and groceries in Germany.",
                summary="Managing money as an exchange student",
                slug="budgeting-abroad",
                publish_date="2030-01-10",
                author="Michael Chen",
                category="Budgeting",
            ),
        ],
        "countries": [
            Country.objects.create(
                name="Germany",
                description="Tuition-free public universities",
                universities=400,
                acceptance_rate="High",
                slug="germany",
            ),
        ],
        "universities": [
            University.objects.create(
                name="Heidelberg University",
                description="Oldest university in Germany",
                country="Germany",
                ranking=47,
                slug="heidelberg-university",
                features=["Research"],
            ),
        ],
        "news": [
            News.objects.create(
                title="Rankings Released",
                content="New global rankings are out.",
                summary="Top destinations change",
                publish_date="2030-02-01",
                category="University Updates",
                is_featured=True,
                slug="rankings-released",
            ),
            News.objects.create(
                title="Visa Rules Simplified",
                content="The UK streamlines applications.",
                summary="Fewer documents required",
                publish_date="2030-01-15",
                category="Visa Updates",
                slug="visa-rules-simplified",
            ),
        ],
    }
