# recommend/views.py
import logging

from django.shortcuts import render

from .exceptions import RecommendationError
from .forms import InputForm
from .predictor import predict
from .results import RecommendationResult, ResultSlot

logger = logging.getLogger(__name__)


def home(request):
    slot = ResultSlot.for_request(request)
    result = None

    if request.method == 'POST':
        form = InputForm(request.POST)
        if form.is_valid():
            ticket = slot.issue()
            try:
                outcome = RecommendationResult.success(predict(form.feature_vector()))
            except RecommendationError as e:
                logger.debug("recommendation failed: %s", e)
                outcome = RecommendationResult.failure(e)
            if slot.resolve(ticket, outcome):
                result = outcome
    else:
        form = InputForm()
        slot.clear()

    if result is None:
        result = slot.current()
    return render(request, 'recommend/home.html', {'form': form, 'result': result})
