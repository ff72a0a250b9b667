"""HTTP handlers for salary estimation.

The trained estimator is owned by the salary app config and injected here.
"""

from django.apps import apps
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from salary.estimator import SalaryEstimator
from salary.handlers.serializers import SalaryPredictSerializer, SalaryReportSerializer
from salary.market import build_report


class SalaryPredictView(APIView):
    """Handler for POST /api/salary/predict"""

    estimator: SalaryEstimator | None = None

    def get_estimator(self) -> SalaryEstimator:
        if self.estimator is not None:
            return self.estimator
        return apps.get_app_config("salary").estimator

    def post(self, request: Request) -> Response:
        payload = SalaryPredictSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        record = payload.to_record()
        estimate = self.get_estimator().predict(record)
        return Response(SalaryReportSerializer(build_report(record, estimate)).data)
