"""Salary estimator: feature encoder plus a trained feed-forward network.

The estimator is built and trained once while the app initializes and then
shared read-only by request handlers.
"""

import logging
from collections.abc import Sequence

import numpy as np

from salary.domain import ModelNotReadyError, SalaryBand, SalaryEstimate, SalaryRecord
from salary.encoding import FEATURE_WIDTH, SalaryFeatureEncoder
from salary.network import FeedForwardNetwork
from salary.training_data import REFERENCE_SALARIES

logger = logging.getLogger(__name__)

RANGE_FACTOR = 1.15
MAX_CONFIDENCE = 95.0
DEFAULT_EPOCHS = 100
CURRENCY = "INR"


class SalaryEstimator:
    """Predicts a salary range for a SalaryRecord."""

    def __init__(
        self,
        encoder: SalaryFeatureEncoder | None = None,
        band: SalaryBand | None = None,
        seed: int | None = None,
    ) -> None:
        self.encoder = encoder if encoder is not None else SalaryFeatureEncoder(FEATURE_WIDTH)
        self.band = band if band is not None else SalaryBand()
        self._rng = np.random.default_rng(seed)
        self.network = FeedForwardNetwork(input_size=self.encoder.width, rng=self._rng)
        self._trained = False

    @property
    def is_trained(self) -> bool:
        return self._trained

    def train(self, samples: Sequence[SalaryRecord], epochs: int = DEFAULT_EPOCHS) -> list[float]:
        """Fit the network and return the mean loss of every epoch.

        Raises:
            ValueError: If there are no samples, a sample has no salary, or
                epochs is not positive.
        """
        if epochs < 1:
            raise ValueError("epochs must be positive")
        if not samples:
            raise ValueError("Training requires at least one sample")
        if any(sample.salary is None for sample in samples):
            raise ValueError("Every training sample needs a salary")

        inputs = np.stack([self.encoder.encode(sample) for sample in samples])
        targets = np.array([[self.band.normalize(sample.salary)] for sample in samples])

        logger.info("Training salary model", extra={"samples": len(samples), "epochs": epochs})
        history = []
        for epoch in range(epochs):
            total = 0.0
            for i in self._rng.permutation(len(samples)):
                total += self.network.train_step(inputs[i], targets[i])
            loss = total / len(samples)
            history.append(loss)
            if epoch % 10 == 0:
                logger.info("Training epoch", extra={"epoch": epoch, "loss": round(loss, 6)})

        self._trained = True
        logger.info("Salary model trained", extra={"final_loss": round(history[-1], 6)})
        return history

    def train_on_reference_data(self, epochs: int = DEFAULT_EPOCHS) -> list[float]:
        return self.train(REFERENCE_SALARIES, epochs)

    def predict(self, record: SalaryRecord) -> SalaryEstimate:
        """Estimate the salary range for a profile or job.

        Raises:
            ModelNotReadyError: If the model has not been trained.
        """
        if not self._trained:
            raise ModelNotReadyError()

        features = self.encoder.encode(record)
        score = self.network.score(features)
        average = max(self.band.scale(score), self.band.low * RANGE_FACTOR)
        completeness = np.count_nonzero(features) / features.size
        confidence = round(min(MAX_CONFIDENCE, 50 + 50 * completeness), 1)

        return SalaryEstimate(
            min=average / RANGE_FACTOR,
            max=average * RANGE_FACTOR,
            average=average,
            currency=CURRENCY,
            confidence=confidence,
        )
