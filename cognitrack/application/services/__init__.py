from cognitrack.application.services.patient_analytics_service import PatientAnalyticsService

__all__ = ["PatientAnalyticsService"]
