# File: backend/ordersms_backend/urls.py
from django.http import JsonResponse
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView


def root(_r):
    return JsonResponse({
        "service": "ordersms-backend",
        "docs": "/api/docs/",
        "validate": "/api/v1/order-sms/validate/",
    })


def healthz(_request):
    return JsonResponse({"ok": True})


urlpatterns = [
    path("healthz/", healthz),

    # API docs
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    path("api/v1/order-sms/", include("ordersms.urls")),

    # SimpleJWT (admin UI authenticates with a bearer token)
    path("api/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),

    path("", root),
]
