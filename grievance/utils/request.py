"""
Request body helpers shared by the API blueprints
"""

from flask import request

from grievance.errors import ValidationError


def get_json_body():
    """Parsed JSON body as a dict; an empty or missing body counts as ``{}``"""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data
