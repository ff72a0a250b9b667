"""Train a fresh salary estimator on the reference data and report the loss curve.

Weights are not persisted; the running server keeps its own estimator.
"""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from salary.estimator import SalaryEstimator


class Command(BaseCommand):
    help = "Train the salary model on the reference data and print the loss curve"

    def add_arguments(self, parser):
        parser.add_argument("--epochs", type=int, default=settings.SALARY_TRAINING_EPOCHS)
        parser.add_argument("--seed", type=int, default=settings.SALARY_MODEL_SEED)

    def handle(self, *args, **options):
        epochs = options["epochs"]
        if epochs < 1:
            raise CommandError("--epochs must be positive")

        estimator = SalaryEstimator(seed=options["seed"])
        history = estimator.train_on_reference_data(epochs=epochs)

        for epoch in range(0, len(history), 10):
            self.stdout.write(f"epoch {epoch:>4}  loss {history[epoch]:.6f}")
        self.stdout.write(
            self.style.SUCCESS(f"Trained for {epochs} epochs, final loss {history[-1]:.6f}")
        )
