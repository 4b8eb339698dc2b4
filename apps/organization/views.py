from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, AllowAny, SAFE_METHODS
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRoleOrReadOnly
from .models import Entity
from .serializers import EntitySerializer, AppSettingsSerializer
from .services import (
    check_payload_size,
    create_entity,
    update_entity,
    check_setting_keys,
    get_app_settings,
    update_app_settings,
    EntityNotFoundError,
    UnknownSettingError,
)


class EntityViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the organization profile.

    Only one entity may exist: a second create answers 409.
    Bodies larger than ENTITY_MAX_PAYLOAD_BYTES answer 413.
    """

    queryset = Entity.objects.all()
    serializer_class = EntitySerializer
    permission_classes = [IsAuthenticated, IsAdminRoleOrReadOnly]
    pagination_class = None

    def create(self, request, *args, **kwargs):
        check_payload_size(request.data)
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        entity = create_entity(**serializer.validated_data)
        return Response(EntitySerializer(entity).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        check_payload_size(request.data)
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            entity = update_entity(entity_id=instance.id, **serializer.validated_data)
        except EntityNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(EntitySerializer(entity).data)


class SettingsPermission(IsAdminRoleOrReadOnly):
    """Anyone may read (the login page is themed from it); admins write."""

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return bool(request.user and request.user.is_authenticated) and super().has_permission(request, view)


@extend_schema(
    methods=['GET'],
    responses={200: AppSettingsSerializer},
    description='Get the application settings; unsaved keys carry their defaults.',
    tags=['settings'],
)
@extend_schema(
    methods=['PUT', 'PATCH'],
    request=AppSettingsSerializer,
    responses={200: AppSettingsSerializer},
    description='Merge the given keys into the settings. Unknown keys are rejected.',
    tags=['settings'],
)
@api_view(['GET', 'PUT', 'PATCH'])
@permission_classes([SettingsPermission])
def app_settings_view(request):
    """
    GET   /api/settings/
    PUT   /api/settings/  (merge)
    PATCH /api/settings/  (merge)
    """
    if request.method == 'GET':
        return Response(AppSettingsSerializer(get_app_settings()).data)

    if not isinstance(request.data, dict):
        return Response({'error': 'Body must be a JSON object'}, status=status.HTTP_400_BAD_REQUEST)

    # Output-only fields echoed back from a GET are ignored
    read_only = set(AppSettingsSerializer.Meta.read_only_fields)
    data = {key: value for key, value in request.data.items() if key not in read_only}

    try:
        check_setting_keys(data.keys())
    except UnknownSettingError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    serializer = AppSettingsSerializer(get_app_settings(), data=data, partial=True)
    serializer.is_valid(raise_exception=True)

    app_settings = update_app_settings(values=serializer.validated_data)
    return Response(AppSettingsSerializer(app_settings).data)
