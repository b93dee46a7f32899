from pathlib import Path
import os
import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-only")
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"
APPEND_SLASH = True

ALLOWED_HOSTS = ["*", "localhost", "127.0.0.1"]


INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.staticfiles",

    "rest_framework",
    "drf_spectacular",
    "corsheaders",

    "commons",         # health endpoints, middleware, handler de erros
    "armazenamento",   # gerenciador do armazenamento local + acesso genérico
    "produtos",
    "estoque",         # entradas de mercadoria
    "vendas",
    "clientes",
    "fornecedores",
    "financeiro",
    "carrinho",        # motor de carrinho + espelho de sessão
    "backup",
]

# Apps cujas migrações formam a versão do schema do armazenamento local.
APPS_ARMAZENAMENTO = (
    "produtos",
    "estoque",
    "vendas",
    "clientes",
    "fornecedores",
    "financeiro",
    "carrinho",
)


MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "commons.middleware.RequestLogMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]


ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

CORS_ALLOW_ALL_ORIGINS = True

DATA_DIR = Path(os.getenv("LOJA_DATA_DIR", BASE_DIR / "dados"))

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("LOJA_DB_PATH", str(DATA_DIR / "controle_doces.sqlite3")),
        "TEST": {
            # banco de testes em memória
            "NAME": None,
        },
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Sem autenticação: a ferramenta roda localmente para um único operador.
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "EXCEPTION_HANDLER": "commons.exception_handler.tratar_excecao",
    "COERCE_DECIMAL_TO_STRING": True,
}

LANGUAGE_CODE = "pt-br"
TIME_ZONE = "America/Sao_Paulo"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"

SPECTACULAR_SETTINGS = {
    "TITLE": "Controle de Doces API",
    "VERSION": "1.0",
    "SERVE_INCLUDE_SCHEMA": False,
}

# =============================
# Regras de negócio
# =============================
TAXA_IMPOSTO = "0.05"
LIMITE_ESTOQUE_BAIXO = 10
PREFIXO_ARQUIVO_BACKUP = "controle_doces_backup"

sentry_sdk.init(
    dsn=os.getenv("SENTRY_DSN", ""),
    integrations=[DjangoIntegration()],
    traces_sample_rate=0.1,
    send_default_pii=False,
)

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

LOG_LEVEL = os.getenv("LOJA_LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "class": "pythonjsonlogger.json.JsonFormatter",
        },
        "simple": {
            "format": "{levelname} {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "level": LOG_LEVEL,
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "level": "INFO",
            "propagate": True,
        },
        "django.db.backends": {
            "level": "WARNING",
            "propagate": True,
        },
        "armazenamento": {
            "level": "DEBUG",
            "propagate": True,
        },
    },
}
