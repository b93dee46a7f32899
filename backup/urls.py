# backup/urls.py

from django.urls import path

from backup.views.backup_views import ExportarBackupView, RestaurarBackupView

urlpatterns = [
    path("exportar/", ExportarBackupView.as_view(), name="backup-exportar"),
    path("restaurar/", RestaurarBackupView.as_view(), name="backup-restaurar"),
]
