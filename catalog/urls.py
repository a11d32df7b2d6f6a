from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from . import views
from .store import CONTENT_KINDS

urlpatterns = [
    # Search and navigation
    path("search/", views.site_search, name="search"),
    path("menu/", views.menu_list, name="menu-list"),
    path("news/featured/", views.featured_news, name="news-featured"),
    # Admin authentication
    path("admin/auth/", views.admin_profile, name="admin-profile"),
    path("admin/auth/login/", views.admin_login, name="admin-login"),
    path("admin/auth/logout/", views.admin_logout, name="admin-logout"),
    path("admin/auth/token/refresh/", TokenRefreshView.as_view(), name="token-refresh"),
    # Admin statistics
    path("admin/statistics/", views.admin_statistics, name="admin-statistics"),
    # Admin menu management
    path("admin/menu/", views.admin_collection, {"kind": "menu"}, name="admin-menu-list"),
    path("admin/menu/<str:pk>/", views.admin_record, {"kind": "menu"}, name="admin-menu-detail"),
]

for kind in CONTENT_KINDS:
    urlpatterns += [
        # Public catalog
        path(f"{kind}/", views.content_list, {"kind": kind}, name=f"{kind}-list"),
        path(f"{kind}/facets/", views.content_facets, {"kind": kind}, name=f"{kind}-facets"),
        path(f"{kind}/<slug:slug>/", views.content_detail, {"kind": kind}, name=f"{kind}-detail"),
        # Admin CRUD
        path(f"admin/{kind}/", views.admin_collection, {"kind": kind}, name=f"admin-{kind}-list"),
        path(f"admin/{kind}/<str:pk>/", views.admin_record, {"kind": kind}, name=f"admin-{kind}-detail"),
    ]
