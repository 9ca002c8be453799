# recommend/results.py
import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)

ERROR_PREFIX = 'An error occurred while fetching the recommendation. Please try again.'

SESSION_KEY = 'recommend_client'
DEFAULT_TTL = 3600


@dataclass(frozen=True)
class RecommendationResult:
    """What the result panel shows: a crop, an error, or nothing."""
    crop: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self):
        if self.crop is not None and self.error is not None:
            raise ValueError("a result holds either a crop or an error, not both")

    @classmethod
    def success(cls, crop):
        return cls(crop=crop)

    @classmethod
    def failure(cls, exc):
        return cls(error=f"{ERROR_PREFIX} {exc}")

    @property
    def is_empty(self):
        return self.crop is None and self.error is None

    def as_dict(self):
        return {'crop': self.crop, 'error': self.error}

    @classmethod
    def from_dict(cls, data):
        if not data:
            return EMPTY
        return cls(crop=data.get('crop'), error=data.get('error'))


EMPTY = RecommendationResult()


class ResultSlot:
    """
    The single result shown to one browser session.

    Submissions take a ticket from `issue()`; `resolve()` only stores the
    outcome while that ticket is still the latest one, so a slow response
    never overwrites a newer one. `clear()` also advances the sequence, which
    turns any response still in flight into a no-op.
    """

    def __init__(self, client_id, ttl=None):
        self.client_id = client_id
        self.ttl = getattr(settings, 'CROP_RESULT_TTL', DEFAULT_TTL) if ttl is None else ttl
        self.seq_key = f'recommend:seq:{client_id}'
        self.result_key = f'recommend:result:{client_id}'

    @classmethod
    def for_request(cls, request):
        client_id = request.session.get(SESSION_KEY)
        if client_id is None:
            client_id = uuid.uuid4().hex
            request.session[SESSION_KEY] = client_id
        return cls(client_id)

    def issue(self):
        cache.add(self.seq_key, 0, self.ttl)
        try:
            return cache.incr(self.seq_key)
        except ValueError:
            # expired between add() and incr()
            cache.set(self.seq_key, 1, self.ttl)
            return 1

    def latest(self):
        return cache.get(self.seq_key, 0)

    def resolve(self, ticket, result):
        latest = self.latest()
        if latest > ticket:
            logger.info("discarding stale response for ticket %s (latest %s)", ticket, latest)
            return False
        # sequence evicted from the cache while the request was in flight
        cache.add(self.seq_key, ticket, self.ttl)
        cache.set(self.result_key, result.as_dict(), self.ttl)
        return True

    def current(self):
        return RecommendationResult.from_dict(cache.get(self.result_key))

    def clear(self):
        self.issue()
        cache.delete(self.result_key)
