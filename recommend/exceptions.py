# recommend/exceptions.py


class RecommendationError(Exception):
    """Base class for a submission that did not produce a crop name."""


class RequestError(RecommendationError):
    """The prediction service answered with a non-2xx status."""

    def __init__(self, status_code):
        self.status_code = status_code
        super().__init__(f"Recommendation failed: the prediction service returned HTTP {status_code}")


class TransportError(RecommendationError):
    """The prediction service could not be reached."""


class DecodingError(RecommendationError):
    """The response body could not be turned into a crop name."""
