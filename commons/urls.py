from django.urls import path

from .views.commons_views import liveness, readiness

# sondas de saúde: processo vivo / armazenamento aberto na versão alvo
urlpatterns = [
    path("health/liveness", liveness, name="health-liveness"),
    path("health/readiness", readiness, name="health-readiness"),
]
