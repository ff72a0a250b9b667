"""Django settings for the job board ticketing and salary API."""

from pathlib import Path

from config.env import get_settings

env = get_settings()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = env.django_secret_key.get_secret_value()
DEBUG = env.debug and not env.is_production
ALLOWED_HOSTS = [host.strip() for host in env.allowed_hosts.split(",") if host.strip()]

DEPLOYMENT_ENVIRONMENT = env.environment

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "events",
    "tickets",
    "salary",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

if env.postgres_host:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "HOST": env.postgres_host,
            "PORT": env.postgres_port,
            "USER": env.postgres_user,
            "PASSWORD": env.postgres_password.get_secret_value(),
            "NAME": env.postgres_db,
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / env.database_name,
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
TIME_ZONE = "UTC"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "EXCEPTION_HANDLER": "core.handlers.domain_exception_handler",
    "UNAUTHENTICATED_USER": None,
}

# Tickets
TICKET_SECRET = (
    env.ticket_secret.get_secret_value() if env.ticket_secret is not None else None
)
TICKET_ID_MAX_ATTEMPTS = env.ticket_id_max_attempts

# Salary model
SALARY_TRAIN_ON_STARTUP = env.salary_train_on_startup
SALARY_TRAINING_EPOCHS = env.salary_training_epochs
SALARY_MODEL_SEED = env.salary_model_seed

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
            "fmt": "%(levelname)s %(name)s %(message)s %(asctime)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": env.log_level,
    },
    "loggers": {
        "django.db.backends": {
            "level": "WARNING",
        },
    },
}
