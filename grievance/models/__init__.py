"""
Models package initialization
Import all models here for easy access
"""

from grievance.models.user import User, UserRole
from grievance.models.complaint import Complaint, ComplaintStatus, ComplaintPriority
from grievance.models.category import Category
from grievance.models.status_history import StatusHistory

__all__ = [
    'User',
    'UserRole',
    'Complaint',
    'ComplaintStatus',
    'ComplaintPriority',
    'Category',
    'StatusHistory',
]
