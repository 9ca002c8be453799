# recommend/api.py
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .exceptions import RecommendationError
from .forms import InputForm
from .predictor import predict


@api_view(['POST'])
def api_recommend(request):
    if not isinstance(request.data, dict):
        errors = {'non_field_errors': ['Expected a JSON object with the seven input fields.']}
        return Response({'errors': errors}, status=status.HTTP_400_BAD_REQUEST)
    form = InputForm(request.data)
    if not form.is_valid():
        errors = {field: [e['message'] for e in errs] for field, errs in form.errors.get_json_data().items()}
        return Response({'errors': errors}, status=status.HTTP_400_BAD_REQUEST)
    try:
        crop = predict(form.feature_vector())
    except RecommendationError as e:
        return Response({'error': str(e)}, status=status.HTTP_502_BAD_GATEWAY)
    return Response({'crop': crop})
