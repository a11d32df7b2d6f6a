"""
Admin authentication.

Admin calls carry an explicit ``AdminSession`` instead of relying on ambient
request state, so the CRUD services can be called (and tested) without HTTP.
Tokens are simplejwt access tokens; their format and lifetime are configured
in ``SIMPLE_JWT``.
"""

import logging

from django.contrib.auth import authenticate
from django.contrib.auth.models import User
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken, TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from .exceptions import Forbidden, Unauthorized

logger = logging.getLogger(__name__)


def is_admin_user(user):
    if not user or not user.is_authenticated or not user.is_active:
        return False
    return user.is_staff or user.is_superuser


class AdminSession:
    def __init__(self, user, token=None):
        self.user = user
        self.token = token

    def __repr__(self):
        return f"AdminSession(user={self.username!r}, is_admin={self.is_admin})"

    @property
    def username(self):
        return getattr(self.user, "username", None)

    @property
    def is_admin(self):
        return is_admin_user(self.user)

    @classmethod
    def from_request(cls, request):
        """Session for an authenticated DRF request, or ``None``."""
        user = getattr(request, "user", None)
        if not user or not user.is_authenticated:
            return None
        token = str(request.auth) if request.auth is not None else None
        return cls(user, token=token)

    @classmethod
    def from_token(cls, raw_token):
        if not raw_token:
            raise Unauthorized()
        authenticator = JWTAuthentication()
        try:
            validated = authenticator.get_validated_token(raw_token)
            user = authenticator.get_user(validated)
        except (InvalidToken, AuthenticationFailed, TokenError) as exc:
            logger.warning("Rejected admin token: %s", exc)
            raise Unauthorized("Invalid token. Please log in again.") from exc
        return cls(user, token=raw_token)


def require_admin(session):
    if session is None or not session.user or not session.user.is_authenticated:
        logger.warning("Admin call without a session")
        raise Unauthorized()
    if not session.is_admin:
        logger.warning("Admin call by non-admin user %s", session.username)
        raise Forbidden()
    return session


def issue_tokens(user):
    refresh = RefreshToken.for_user(user)
    refresh["username"] = user.username
    refresh["is_admin"] = is_admin_user(user)
    return {
        "refresh": str(refresh),
        "access": str(refresh.access_token),
    }


def authenticate_admin(username, password):
    """Return the admin ``User`` for these credentials or raise."""
    user = authenticate(username=username, password=password)
    if not user:
        # Fall back to logging in with the e-mail address
        try:
            user_obj = User.objects.get(email__iexact=username)
            user = authenticate(username=user_obj.username, password=password)
        except (User.DoesNotExist, User.MultipleObjectsReturned):
            user = None

    if not user:
        logger.warning("Failed admin login for %s", username)
        raise Unauthorized("Invalid credentials")
    if not is_admin_user(user):
        logger.warning("Non-admin user %s tried to log in to the dashboard", username)
        raise Forbidden()
    return user
