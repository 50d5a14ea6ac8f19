"""
Complaints Blueprint
"""

from grievance.api.complaints.routes import complaints_bp

__all__ = ['complaints_bp']
