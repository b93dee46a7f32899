# config/urls.py
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("", include("commons.urls")),
    path("api/v1/", include("produtos.urls")),
    path("api/v1/", include("vendas.urls")),
    path("api/v1/", include("clientes.urls")),
    path("api/v1/", include("fornecedores.urls")),
    path("api/v1/financeiro/", include("financeiro.urls")),
    path("api/v1/estoque/", include("estoque.urls")),
    path("api/v1/backup/", include("backup.urls")),

    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
]
