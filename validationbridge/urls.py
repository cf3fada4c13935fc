from django.urls import path, include

urlpatterns = [
    path("api/v1/client-validation-rules/", include("client_validation.urls")),
]
