# clientes/urls.py

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from clientes.views.cliente_views import ClienteViewSet

router = DefaultRouter()
router.register(r"clientes", ClienteViewSet, basename="cliente")

urlpatterns = [
    path("", include(router.urls)),
]
