# estoque/urls.py

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from estoque.views.entrada_views import EntradaViewSet, EstoqueBaixoView

router = DefaultRouter()
router.register(r"entradas", EntradaViewSet, basename="entrada")

urlpatterns = [
    path("baixo/", EstoqueBaixoView.as_view(), name="estoque-baixo"),
    path("", include(router.urls)),
]
