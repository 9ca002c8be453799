# cropsite/urls.py
from django.urls import include, path

urlpatterns = [
    path('', include('recommend.urls')),
]
