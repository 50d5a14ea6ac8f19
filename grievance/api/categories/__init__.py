"""
Categories Blueprint
"""

from grievance.api.categories.routes import categories_bp

__all__ = ['categories_bp']
