# fornecedores/urls.py

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from fornecedores.views.fornecedor_views import FornecedorViewSet

router = DefaultRouter()
router.register(r"fornecedores", FornecedorViewSet, basename="fornecedor")

urlpatterns = [
    path("", include(router.urls)),
]
