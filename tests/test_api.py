"""HTTP tests for the public catalog and admin endpoints."""

from unittest import mock

import pytest
from django.db import DatabaseError

from catalog.models import Article, MenuItem, News, Scholarship
from tests.payloads import article_payload, scholarship_payload

pytestmark = pytest.mark.django_db


class TestPublicListing:
    def test_list_returns_every_record(self, api_client, catalog_content):
        response = api_client.get("/api/scholarships/")
        assert response.status_code == 200
        assert [s["slug"] for s in response.json()] == ["fulbright-program", "erasmus-grant"]

    def test_empty_collection_is_empty_list(self, api_client):
        response = api_client.get("/api/countries/")
        assert response.status_code == 200
        assert response.json() == []

    def test_search_and_tag_filters(self, api_client, catalog_content):
        assert [s["slug"] for s in api_client.get("/api/scholarships/", {"search": "FULBRIGHT"}).json()] == ["fulbright-program"]
        assert [s["slug"] for s in api_client.get("/api/scholarships/", {"tag": "Partial Aid"}).json()] == ["erasmus-grant"]
        assert api_client.get("/api/scholarships/", {"country": "France"}).json() == []

    def test_all_is_a_no_op(self, api_client, catalog_content):
        response = api_client.get("/api/news/", {"category": "all"})
        assert len(response.json()) == 2

    def test_limit(self, api_client, catalog_content):
        assert len(api_client.get("/api/news/", {"limit": 1}).json()) == 1

    def test_bad_limit(self, api_client):
        assert api_client.get("/api/news/", {"limit": "many"}).status_code == 400

    def test_unsupported_filter_is_bad_request(self, api_client):
        response = api_client.get("/api/countries/", {"category": "Europe"})
        assert response.status_code == 400

    def test_detail_by_slug(self, api_client, catalog_content):
        response = api_client.get("/api/universities/heidelberg-university/")
        assert response.status_code == 200
        assert response.json()["features"] == ["Research"]

    def test_missing_slug(self, api_client):
        response = api_client.get("/api/scholarships/does-not-exist/")
        assert response.status_code == 404
        assert response.json() == {"error": "Scholarship not found"}

    def test_featured_news(self, api_client, catalog_content):
        response = api_client.get("/api/news/featured/")
        assert [n["slug"] for n in response.json()] == ["rankings-released"]

    def test_facets(self, api_client, catalog_content):
        response = api_client.get("/api/scholarships/facets/")
        assert response.json() == {
            "countries": ["United States", "Germany"],
            "tags": ["Fully Funded", "Merit-Based", "Partial Aid"],
        }

    def test_menu(self, api_client):
        MenuItem.objects.create(title="News", url="/news", position=2)
        MenuItem.objects.create(title="Home", url="/", position=1, children=[{"id": 11, "title": "About", "url": "/about"}])
        response = api_client.get("/api/menu/")
        assert [m["title"] for m in response.json()] == ["Home", "News"]
        assert response.json()[0]["children"][0]["url"] == "/about"

    def test_store_failure_is_distinct_from_empty(self, api_client):
        with mock.patch.object(Scholarship.objects, "all", side_effect=DatabaseError("down")):
            response = api_client.get("/api/scholarships/")
        assert response.status_code == 503
        assert "error" in response.json()


class TestSearchEndpoint:
    def test_partitioned_results(self, api_client, catalog_content):
        response = api_client.get("/api/search/", {"query": "germany"})
        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"scholarships", "articles", "countries", "universities", "news"}
        assert [c["slug"] for c in body["countries"]] == ["germany"]
        assert body["news"] == []

    def test_q_alias(self, api_client, catalog_content):
        body = api_client.get("/api/search/", {"q": "visa"}).json()
        assert [n["slug"] for n in body["news"]] == ["visa-rules-simplified"]

    def test_empty_query_returns_everything(self, api_client, catalog_content):
        body = api_client.get("/api/search/").json()
        assert len(body["scholarships"]) == 2
        assert len(body["news"]) == 2
        assert len(body["countries"]) == 1


class TestAdminAuth:
    def test_login_returns_tokens(self, api_client, admin_user):
        response = api_client.post("/api/admin/auth/login/", {"username": "editor", "password": "s3cret-pass"}, format="json")
        assert response.status_code == 200
        assert set(response.json()["tokens"]) == {"access", "refresh"}
        assert response.json()["user"]["is_admin"] is True

    def test_login_with_email(self, api_client, admin_user):
        response = api_client.post("/api/admin/auth/login/", {"username": "editor@example.com", "password": "s3cret-pass"}, format="json")
        assert response.status_code == 200

    def test_wrong_password(self, api_client, admin_user):
        response = api_client.post("/api/admin/auth/login/", {"username": "editor", "password": "wrong"}, format="json")
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_non_admin_cannot_log_in(self, api_client, regular_user):
        response = api_client.post("/api/admin/auth/login/", {"username": "reader", "password": "s3cret-pass"}, format="json")
        assert response.status_code == 403

    def test_missing_credentials(self, api_client):
        response = api_client.post("/api/admin/auth/login/", {}, format="json")
        assert response.status_code == 400
        assert "username" in response.json()

    def test_profile(self, admin_client):
        response = admin_client.get("/api/admin/auth/")
        assert response.status_code == 200
        assert response.json()["username"] == "editor"

    def test_logout_blacklists_refresh_token(self, api_client, admin_user):
        tokens = api_client.post(
            "/api/admin/auth/login/", {"username": "editor", "password": "s3cret-pass"}, format="json"
        ).json()["tokens"]
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")
        assert api_client.post("/api/admin/auth/logout/", {"refresh": tokens["refresh"]}, format="json").status_code == 200

        api_client.credentials()
        response = api_client.post("/api/admin/auth/token/refresh/", {"refresh": tokens["refresh"]}, format="json")
        assert response.status_code == 401


class TestAdminCrud:
    def test_create_without_token(self, api_client):
        response = api_client.post("/api/admin/articles/", article_payload(), format="json")
        assert response.status_code == 401
        assert Article.objects.count() == 0

    def test_create_with_invalid_token(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer not-a-real-token")
        response = api_client.post("/api/admin/articles/", article_payload(), format="json")
        assert response.status_code == 401
        assert Article.objects.count() == 0

    def test_create_as_non_admin(self, reader_client):
        response = reader_client.post("/api/admin/articles/", article_payload(), format="json")
        assert response.status_code == 403
        assert Article.objects.count() == 0

    def test_create_and_read_back(self, admin_client):
        response = admin_client.post("/api/admin/scholarships/", scholarship_payload(), format="json")
        assert response.status_code == 201
        body = response.json()
        assert body["slug"] == "fulbright-program"

        public = admin_client.get(f"/api/scholarships/{body['slug']}/")
        assert public.status_code == 200
        assert public.json()["id"] == body["id"]

    def test_create_missing_field(self, admin_client):
        payload = article_payload()
        del payload["summary"]
        response = admin_client.post("/api/admin/articles/", payload, format="json")
        assert response.status_code == 400
        assert "summary" in response.json()
        assert Article.objects.count() == 0

    def test_list_is_paginated(self, admin_client, catalog_content):
        response = admin_client.get("/api/admin/news/", {"page": 1, "limit": 1})
        body = response.json()
        assert body["total"] == 2
        assert body["total_pages"] == 2
        assert len(body["items"]) == 1

    def test_page_past_the_end(self, admin_client, catalog_content):
        body = admin_client.get("/api/admin/news/", {"page": 9}).json()
        assert body["items"] == []

    def test_get_by_id(self, admin_client, catalog_content):
        news = catalog_content["news"][0]
        response = admin_client.get(f"/api/admin/news/{news.pk}/")
        assert response.json()["slug"] == news.slug

    def test_get_by_slug(self, admin_client, catalog_content):
        news = catalog_content["news"][1]
        response = admin_client.get(f"/api/admin/news/{news.slug}/")
        assert response.status_code == 200
        assert response.json()["id"] == news.pk

    def test_get_unknown_slug(self, admin_client, catalog_content):
        response = admin_client.get("/api/admin/news/no-such-story/")
        assert response.status_code == 404
        assert "error" in response.json()

    def test_patch_toggles_featured(self, admin_client, catalog_content):
        news = catalog_content["news"][1]
        response = admin_client.patch(f"/api/admin/news/{news.pk}/", {"is_featured": True}, format="json")
        assert response.status_code == 200
        featured = admin_client.get("/api/news/featured/").json()
        assert {n["slug"] for n in featured} == {"rankings-released", "visa-rules-simplified"}

    def test_put_replaces_record(self, admin_client, catalog_content):
        scholarship = catalog_content["scholarships"][1]
        payload = scholarship_payload(title="Erasmus Grant", country="France", slug="erasmus-grant")
        response = admin_client.put(f"/api/admin/scholarships/{scholarship.pk}/", payload, format="json")
        assert response.status_code == 200
        assert admin_client.get("/api/scholarships/", {"country": "France"}).json()[0]["slug"] == "erasmus-grant"

    def test_delete_then_delete_again(self, admin_client, catalog_content):
        country = catalog_content["countries"][0]
        first = admin_client.delete(f"/api/admin/countries/{country.pk}/")
        assert first.status_code == 200
        assert first.json() == {"message": "Country deleted successfully"}

        second = admin_client.delete(f"/api/admin/countries/{country.pk}/")
        assert second.status_code == 404
        assert admin_client.get("/api/countries/").json() == []

    def test_delete_without_token(self, api_client, catalog_content):
        country = catalog_content["countries"][0]
        assert api_client.delete(f"/api/admin/countries/{country.pk}/").status_code == 401
        assert api_client.get("/api/countries/germany/").status_code == 200

    def test_menu_crud(self, admin_client):
        response = admin_client.post(
            "/api/admin/menu/",
            {"title": "Scholarships", "url": "/scholarships", "children": [{"id": 21, "title": "Merit-Based", "url": "/scholarships/merit-based"}]},
            format="json",
        )
        assert response.status_code == 201
        assert admin_client.get("/api/menu/").json()[0]["children"][0]["title"] == "Merit-Based"


class TestStatistics:
    def test_requires_admin(self, reader_client):
        assert reader_client.get("/api/admin/statistics/").status_code == 403

    def test_counts(self, admin_client, catalog_content):
        body = admin_client.get("/api/admin/statistics/").json()
        assert body["totals"]["scholarships"] == 2
        assert body["totals"]["news"] == 2
        assert body["featured_news"] == 1
        assert body["recent"]["countries"] == 1
        assert {"country": "Germany", "count": 1} in body["scholarships_by_country"]


def test_home(api_client):
    response = api_client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "operational"


def test_openapi_schema(api_client):
    response = api_client.get("/swagger.json")
    assert response.status_code == 200
    body = response.json()
    assert body["info"]["title"] == "Study Portal API"
    paths = body["paths"]
    assert "get" in paths["/api/search/"]
    assert "get" in paths["/api/scholarships/{slug}/"]
    assert {"put", "patch", "delete"} <= set(paths["/api/admin/news/{pk}/"])
    operation_ids = [op["operationId"] for ops in paths.values() for op in ops.values()]
    assert len(operation_ids) == len(set(operation_ids))
    assert paths["/api/countries/"]["get"]["tags"] == ["countries"]
