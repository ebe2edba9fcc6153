"""Static analytics data shown when the backend cannot be reached."""

from flouss.application.dtos.analytics import AnalyticsData
from flouss.domain.analytics import CategoryAmount, MonthlyTrend


def fallback_analytics_data() -> AnalyticsData:
    trends = [
        MonthlyTrend(month="Jan", income=2500.0, expenses=1800.0, savings=700.0),
        MonthlyTrend(month="Feb", income=2500.0, expenses=1900.0, savings=600.0),
        MonthlyTrend(month="Mar", income=2700.0, expenses=1850.0, savings=850.0),
    ]
    return AnalyticsData(
        spending_by_category=[
            CategoryAmount("Food", 450.0, 36.0, "#EF4444", "🍽️"),
            CategoryAmount("Transport", 300.0, 24.0, "#F59E0B", "🚗"),
            CategoryAmount("Coffee", 200.0, 16.0, "#8B5CF6", "☕"),
        ],
        monthly_trends=trends,
        total_expenses=950.0,
        current_month=trends[-1],
    )
