from django.urls import path

from .views import ValidateCredentialsView

app_name = "ordersms"

urlpatterns = [
    path("validate/", ValidateCredentialsView.as_view(), name="validate"),
]
