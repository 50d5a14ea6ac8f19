"""
Error taxonomy

Every failure the services raise carries a stable ``kind`` string and an HTTP
status code so the API layer can render a structured payload.
"""


class GrievanceError(Exception):
    """Base class for all domain errors"""

    kind = 'error'
    status_code = 500
    default_message = 'An unexpected error occurred'

    def __init__(self, message=None, detail=None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)

    def to_dict(self, include_detail=False):
        data = {'error': self.kind, 'message': self.message}
        if include_detail and self.detail:
            data['detail'] = self.detail
        return data


class ValidationError(GrievanceError):
    """Missing or malformed input"""
    kind = 'validation_error'
    status_code = 400
    default_message = 'Invalid request'


class AuthenticationError(GrievanceError):
    """Bad or missing credentials"""
    kind = 'authentication_error'
    status_code = 401
    default_message = 'Authentication required'


class AuthorizationError(GrievanceError):
    """Wrong role or not the owner"""
    kind = 'authorization_error'
    status_code = 403
    default_message = 'Insufficient permissions'


class NotFoundError(GrievanceError):
    kind = 'not_found'
    status_code = 404
    default_message = 'Resource not found'


class PersistenceError(GrievanceError):
    """Storage failure; ``detail`` holds the underlying database message"""
    kind = 'persistence_error'
    status_code = 500
    default_message = 'An unexpected error occurred'
