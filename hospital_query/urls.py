"""
URL configuration for the hospital record query service.

The record API provided by the ``records`` app lives under ``/api``.
Operational endpoints (health, Prometheus metrics, Django admin and
the OpenAPI documentation at ``/swagger/`` and ``/redoc/``) are
mounted at the root.
"""
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

from records.views import health

api_info = openapi.Info(
    title="Hospital Record Query API",
    default_version='v1',
    description="Read-only lookups over hospital staff and patient records.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('records.routers')),
    path('healthz', health.healthz, name='healthz'),
    path('', include('django_prometheus.urls')),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]
