import logging
from datetime import timedelta

from django.core.paginator import EmptyPage, Paginator
from django.db.models import Count
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from .auth import AdminSession, authenticate_admin, is_admin_user, issue_tokens
from .exceptions import ValidationError
from .filters import distinct_values, filter_items, split_featured
from .models import Article, Country, News, Scholarship, University
from .search import search
from .serializers import SERIALIZERS, LoginSerializer
from .permissions import IsAdmin
from .services import get_service
from .store import CONTENT_KINDS, store_guard

logger = logging.getLogger(__name__)

# Dropdown values offered on each listing page.
FACET_FIELDS = {
    "scholarships": {"countries": "country", "tags": "tags"},
    "articles": {"categories": "category"},
    "countries": {},
    "universities": {"countries": "country"},
    "news": {"categories": "category"},
}


def parse_positive_int(value, name, default):
    if value in (None, ""):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError({name: ["A valid integer is required."]})
    if number < 0:
        raise ValidationError({name: ["Must be zero or greater."]})
    return number


def serialize(kind, records, many=False):
    return SERIALIZERS[kind](records, many=many).data


# Public catalog views
@api_view(["GET"])
@permission_classes([AllowAny])
def content_list(request, kind):
    params = request.query_params
    limit = parse_positive_int(params.get("limit"), "limit", 0)
    try:
        items = filter_items(
            get_service(kind).list(),
            kind,
            search=params.get("search"),
            category=params.get("category"),
            country=params.get("country"),
            tag=params.get("tag"),
        )
    except ValueError as exc:
        raise ValidationError({"filters": [str(exc)]})

    if limit:
        items = items[:limit]
    return Response(serialize(kind, items, many=True), status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([AllowAny])
def content_detail(request, kind, slug):
    record = get_service(kind).store.get_by_slug(slug)
    return Response(serialize(kind, record), status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([AllowAny])
def content_facets(request, kind):
    items = get_service(kind).list()
    facets = {name: distinct_values(items, field) for name, field in FACET_FIELDS[kind].items()}
    return Response(facets, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([AllowAny])
def featured_news(request):
    featured, _regular = split_featured(get_service("news").list())
    return Response(serialize("news", featured, many=True), status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([AllowAny])
def menu_list(request):
    return Response(serialize("menu", get_service("menu").list(), many=True), status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([AllowAny])
def site_search(request):
    query = request.query_params.get("query", request.query_params.get("q", ""))
    results = search(query)
    return Response(
        {kind: serialize(kind, records, many=True) for kind, records in results.items()},
        status=status.HTTP_200_OK,
    )


# Admin authentication views
@api_view(["POST"])
@permission_classes([AllowAny])
def admin_login(request):
    serializer = LoginSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    user = authenticate_admin(
        serializer.validated_data["username"],
        serializer.validated_data["password"],
    )
    logger.info("Admin %s logged in", user.username)
    return Response(
        {
            "message": "Login successful",
            "tokens": issue_tokens(user),
            "user": {
                "id": user.id,
                "username": user.username,
                "email": user.email,
                "is_admin": True,
                "is_superuser": user.is_superuser,
            },
        },
        status=status.HTTP_200_OK,
    )


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def admin_logout(request):
    try:
        token = RefreshToken(request.data["refresh"])
        token.blacklist()
    except (KeyError, TypeError, TokenError):
        return Response({"error": "Invalid token"}, status=status.HTTP_400_BAD_REQUEST)
    return Response({"message": "Logout successful"}, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def admin_profile(request):
    user = request.user
    return Response(
        {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "is_admin": is_admin_user(user),
            "is_superuser": user.is_superuser,
        },
        status=status.HTTP_200_OK,
    )


# Admin content views
@api_view(["GET", "POST"])
@permission_classes([IsAdmin])
def admin_collection(request, kind):
    service = get_service(kind)

    if request.method == "GET":
        page_number = parse_positive_int(request.query_params.get("page"), "page", 1) or 1
        limit = parse_positive_int(request.query_params.get("limit"), "limit", 10) or 10
        paginator = Paginator(service.list(), limit)
        try:
            page = paginator.page(page_number)
        except EmptyPage:
            page = None
        return Response(
            {
                "items": serialize(kind, page.object_list if page else [], many=True),
                "total_pages": paginator.num_pages,
                "current_page": page_number,
                "total": paginator.count,
            },
            status=status.HTTP_200_OK,
        )

    record = service.create(AdminSession.from_request(request), request.data)
    return Response(serialize(kind, record), status=status.HTTP_201_CREATED)


@api_view(["GET", "PUT", "PATCH", "DELETE"])
@permission_classes([IsAdmin])
def admin_record(request, kind, pk):
    service = get_service(kind)
    session = AdminSession.from_request(request)

    if request.method == "GET":
        return Response(serialize(kind, service.get(pk)), status=status.HTTP_200_OK)

    if request.method in ("PUT", "PATCH"):
        record = service.update(session, pk, request.data, partial=request.method == "PATCH")
        return Response(serialize(kind, record), status=status.HTTP_200_OK)

    service.delete(session, pk)
    label = service.store.label
    return Response({"message": f"{label} deleted successfully"}, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([IsAdmin])
def admin_statistics(request):
    """
    Dashboard counters: totals per collection, featured news, records added
    in the last 30 days and the five countries with most scholarships.
    """
    thirty_days_ago = timezone.now() - timedelta(days=30)
    content_models = {
        "scholarships": Scholarship,
        "articles": Article,
        "countries": Country,
        "universities": University,
        "news": News,
    }

    with store_guard("summarize", "content"):
        totals = {kind: content_models[kind].objects.count() for kind in CONTENT_KINDS}
        recent = {kind: content_models[kind].objects.filter(created_at__gte=thirty_days_ago).count() for kind in CONTENT_KINDS}
        featured = News.objects.filter(is_featured=True).count()
        scholarships_by_country = list(
            Scholarship.objects.order_by()
            .values("country")
            .annotate(count=Count("id"))
            .order_by("-count", "country")[:5]
        )

    return Response(
        {
            "totals": totals,
            "recent": recent,
            "featured_news": featured,
            "scholarships_by_country": scholarships_by_country,
        },
        status=status.HTTP_200_OK,
    )


@api_view(["GET"])
@permission_classes([AllowAny])
def home(request):
    """API index listing the available endpoints."""
    return Response(
        {
            "message": "Welcome to the Study Portal API",
            "version": "1.0",
            "endpoints": {
                "catalog": {kind: f"/api/{kind}/" for kind in CONTENT_KINDS},
                "detail": "/api/{collection}/{slug}/",
                "facets": "/api/{collection}/facets/",
                "featured_news": "/api/news/featured/",
                "menu": "/api/menu/",
                "search": "/api/search/?query=",
                "admin": {
                    "login": "/api/admin/auth/login/",
                    "logout": "/api/admin/auth/logout/",
                    "token_refresh": "/api/admin/auth/token/refresh/",
                    "profile": "/api/admin/auth/",
                    "collection": "/api/admin/{collection}/",
                    "record": "/api/admin/{collection}/{id}/",
                    "statistics": "/api/admin/statistics/",
                },
                "schema": "/swagger.json",
            },
            "status": "operational",
        },
        status=status.HTTP_200_OK,
    )
