from rest_framework.permissions import BasePermission

from .auth import is_admin_user


class IsAdmin(BasePermission):
    """Allow access only to active staff or superusers."""
    message = "Access denied. Admin privileges required."

    def has_permission(self, request, view):
        return is_admin_user(request.user)
