"""Serializers for salary prediction requests and reports."""

from rest_framework import serializers

from salary.domain import Degree, ExperienceLevel, SalaryRecord


class DegreeSerializer(serializers.Serializer):
    degree = serializers.CharField(allow_blank=True, max_length=200)
    field = serializers.CharField(allow_blank=True, max_length=200, default="")


class SalaryPredictSerializer(serializers.Serializer):
    skills = serializers.ListField(
        child=serializers.CharField(max_length=100), max_length=100, default=list
    )
    location = serializers.CharField(allow_blank=True, max_length=200, default="")
    experience_level = serializers.CharField(allow_blank=True, max_length=50, default="")
    education = serializers.ListField(child=DegreeSerializer(), max_length=20, default=list)
    category = serializers.CharField(allow_blank=True, max_length=100, default="")
    title = serializers.CharField(allow_blank=True, max_length=200, default="")
    industry = serializers.CharField(allow_blank=True, max_length=200, default="")

    def to_record(self) -> SalaryRecord:
        data = self.validated_data
        return SalaryRecord(
            skills=tuple(data["skills"]),
            location=data["location"],
            experience_level=ExperienceLevel.parse(data["experience_level"]),
            education=tuple(Degree(**degree) for degree in data["education"]),
            category=data["category"],
            title=data["title"],
            industry=data["industry"],
        )


class SalaryEstimateSerializer(serializers.Serializer):
    min = serializers.FloatField()
    max = serializers.FloatField()
    average = serializers.FloatField()
    currency = serializers.CharField()


class MarketComparisonSerializer(serializers.Serializer):
    market_average = serializers.IntegerField()
    your_prediction = serializers.IntegerField()
    difference = serializers.IntegerField()
    percent_difference = serializers.IntegerField()
    status = serializers.CharField()
    message = serializers.CharField()


class MarketInsightSerializer(serializers.Serializer):
    factor = serializers.CharField()
    impact = serializers.CharField()
    message = serializers.CharField()


class PayBreakdownSerializer(serializers.Serializer):
    base = serializers.IntegerField()
    variable = serializers.IntegerField()
    bonus = serializers.IntegerField()
    benefits = serializers.IntegerField()
    total = serializers.IntegerField()


class SalaryReportSerializer(serializers.Serializer):
    predicted = SalaryEstimateSerializer(source="estimate")
    confidence = serializers.FloatField(source="estimate.confidence")
    market_comparison = MarketComparisonSerializer(source="market")
    market_insights = MarketInsightSerializer(source="insights", many=True)
    breakdown = PayBreakdownSerializer()
