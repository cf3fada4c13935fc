"""Client validation URL routing."""
from django.urls import path
from . import views

app_name = "client_validation"

urlpatterns = [
    path("script/", views.client_validation_script, name="script"),
    path("json/", views.client_validation_json, name="json"),
]
