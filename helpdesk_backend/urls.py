"""
URL configuration for the helpdesk backend.
API endpoints are registered under the `/api/` prefix; the HTML screens
that fire the host extension points live under `/mailboxes/`.
Authentication endpoints are nested under `/api/auth/`.
"""

from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.views import (
    SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView
)
from rest_framework_simplejwt.views import (
    TokenObtainPairView,
    TokenRefreshView,
    TokenVerifyView,
)

from helpdesk_backend.views import index


urlpatterns = [
    path("", index, name="index"),
    path("admin/", admin.site.urls),

    path("api/", RedirectView.as_view(pattern_name="swagger-ui", permanent=False)),

    #  Swagger/Redoc
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),

    path("api/auth/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("api/auth/token/verify/", TokenVerifyView.as_view(), name="token_verify"),

    # Host screens
    path("mailboxes/", include("mailboxes.urls")),

    # Stripe module: settings API and settings screen
    path("", include("stripe_integration.urls")),
]
