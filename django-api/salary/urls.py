from django.urls import path

from salary.handlers import SalaryPredictView

urlpatterns = [
    path("salary/predict", SalaryPredictView.as_view(), name="salary-predict"),
]
