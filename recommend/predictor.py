# recommend/predictor.py
import logging

import requests
from django.conf import settings

from .exceptions import DecodingError, RequestError, TransportError
from .forms import FEATURE_ORDER
from .labels import label_for

logger = logging.getLogger(__name__)

DEFAULT_URL = 'https://crop-recommendation-backend-4va0.onrender.com/predict'
DEFAULT_TIMEOUT = 10


class PredictionClient:
    """Single-attempt JSON client for the remote crop prediction service."""

    def __init__(self, url=None, timeout=None):
        self.url = url or getattr(settings, 'CROP_PREDICTOR_URL', DEFAULT_URL)
        self.timeout = getattr(settings, 'CROP_PREDICTOR_TIMEOUT', DEFAULT_TIMEOUT) if timeout is None else timeout

    def submit(self, features):
        features = list(features)
        if len(features) != len(FEATURE_ORDER):
            raise ValueError(f"expected {len(FEATURE_ORDER)} features, got {len(features)}")

        logger.debug("POST %s features=%s", self.url, features)
        try:
            response = requests.post(self.url, json={'features': features}, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("prediction service unreachable: %s", e)
            raise TransportError(f"Could not reach the prediction service: {e}") from e

        if not response.ok:
            logger.warning("prediction service returned HTTP %s", response.status_code)
            raise RequestError(response.status_code)

        return self.decode(response)

    def decode(self, response):
        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("unparseable prediction response: %s", e)
            raise DecodingError("Malformed response from the prediction service") from e

        prediction = payload.get('prediction') if isinstance(payload, dict) else None
        if not isinstance(prediction, list) or not prediction:
            logger.warning("prediction missing from response: %r", payload)
            raise DecodingError("Malformed response from the prediction service")

        try:
            return label_for(prediction[0])
        except DecodingError:
            logger.warning("prediction index out of range: %r", prediction[0])
            raise


def predict(features):
    """
    features: sequence of the seven values in FEATURE_ORDER
    returns the crop name; raises RecommendationError subclasses on failure
    """
    return PredictionClient().submit(features)
