"""
Role-based permission classes.

Roles are stored on the user (admin, finance_manager, viewer):
- viewer: read-only access to every financial resource
- finance_manager: may create/update/delete financial records
- admin: everything, plus users, organization profile and settings

Usage:
    class CreditorViewSet(viewsets.ModelViewSet):
        permission_classes = [IsAuthenticated, IsFinanceManagerOrReadOnly]
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS


class IsFinanceManagerOrReadOnly(BasePermission):
    """Reads for every authenticated user, writes for admins and finance managers."""

    message = 'Your role does not allow changing financial records.'

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return bool(getattr(request.user, 'can_write', False))


class IsAdminRole(BasePermission):
    """Only users with the admin role."""

    message = 'Administrator role required.'

    def has_permission(self, request, view):
        return bool(getattr(request.user, 'is_admin', False))


class IsAdminRoleOrReadOnly(IsAdminRole):
    """Reads for every authenticated user, writes for admins."""

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return super().has_permission(request, view)
