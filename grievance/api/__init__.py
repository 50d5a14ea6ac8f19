"""
API Package
"""

# Import all blueprints for easy access
from grievance.api.auth import auth_bp
from grievance.api.complaints import complaints_bp
from grievance.api.categories import categories_bp

__all__ = [
    'auth_bp',
    'complaints_bp',
    'categories_bp',
]
