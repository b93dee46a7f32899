# financeiro/urls.py

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from financeiro.views.transacao_financeira_views import (
    ResumoFinanceiroView,
    TransacaoFinanceiraViewSet,
)

router = DefaultRouter()
router.register(r"transacoes", TransacaoFinanceiraViewSet, basename="transacao")

urlpatterns = [
    path("resumo/", ResumoFinanceiroView.as_view(), name="financeiro-resumo"),
    path("", include(router.urls)),
]
