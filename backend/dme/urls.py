from django.urls import path
from .views import ExtractCreateView

urlpatterns = [
    path('extracts/', ExtractCreateView.as_view(), name='extract-create'),
]
