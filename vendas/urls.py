# vendas/urls.py

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from vendas.views.venda_views import VendaViewSet

router = DefaultRouter()
router.register(r"vendas", VendaViewSet, basename="venda")

urlpatterns = [
    path("", include(router.urls)),
]
