from django.contrib import admin
from django.urls import include, path
from rest_framework.renderers import JSONOpenAPIRenderer
from rest_framework.schemas import get_schema_view

from catalog import views

schema_view = get_schema_view(
    title="Study Portal API",
    description="Scholarships, countries, universities, articles and news, plus the admin API that manages them.",
    version="1.0.0",
    public=True,
    renderer_classes=[JSONOpenAPIRenderer],
)

urlpatterns = [
    path("", views.home, name="home"),
    path("swagger.json", schema_view, name="openapi-schema"),
    path("django-admin/", admin.site.urls),
    path("api/", include("catalog.urls")),
]
