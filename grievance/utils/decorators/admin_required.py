"""
Role guard for admin-only routes
"""

from functools import wraps

from flask_jwt_extended import get_current_user, verify_jwt_in_request

from grievance.errors import AuthorizationError


def admin_required():
    """Reject the request unless the bearer token belongs to an active admin"""
    def wrapper(fn):
        @wraps(fn)
        def decorator(*args, **kwargs):
            verify_jwt_in_request()
            if not get_current_user().is_admin:
                raise AuthorizationError('Admin access only')
            return fn(*args, **kwargs)
        return decorator
    return wrapper
