import logging
import os
import sys

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)

MANAGEMENT_ENTRY_POINTS = ("manage.py", "django-admin")
SERVING_COMMANDS = frozenset({"runserver"})


def trains_on_startup(argv: list[str]) -> bool:
    """Management commands other than runserver never serve predictions."""
    if not argv or os.path.basename(argv[0]) not in MANAGEMENT_ENTRY_POINTS:
        return True
    return len(argv) > 1 and argv[1] in SERVING_COMMANDS


class SalaryConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "salary"

    def ready(self) -> None:
        from salary.estimator import SalaryEstimator

        self.estimator = SalaryEstimator(seed=settings.SALARY_MODEL_SEED)
        if settings.SALARY_TRAIN_ON_STARTUP and trains_on_startup(sys.argv):
            self.estimator.train_on_reference_data(epochs=settings.SALARY_TRAINING_EPOCHS)
        else:
            logger.info("Salary model training skipped at startup")
