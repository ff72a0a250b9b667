from salary.handlers.views import SalaryPredictView

__all__ = ["SalaryPredictView"]
