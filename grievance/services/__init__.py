"""
Services Package
Business logic behind the API blueprints
"""

from flask import current_app

from grievance.services.auth_service import AuthService, Identity, current_identity
from grievance.services.complaint_service import ComplaintService
from grievance.services.analytics_service import AnalyticsService
from grievance.services.category_service import CategoryService
from grievance.services.transition_observers import StatusHistoryRecorder, TransitionLogger


def build_complaint_service():
    """Complaint service wired with the default transition observers"""
    return ComplaintService(observers=[StatusHistoryRecorder(), TransitionLogger()])


def get_complaint_service():
    return current_app.extensions['complaint_service']


__all__ = [
    'AuthService',
    'Identity',
    'current_identity',
    'ComplaintService',
    'AnalyticsService',
    'CategoryService',
    'StatusHistoryRecorder',
    'TransitionLogger',
    'build_complaint_service',
    'get_complaint_service',
]
