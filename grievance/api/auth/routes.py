"""
Authentication Routes
"""

from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from extensions import db, limiter
from grievance.errors import NotFoundError
from grievance.models.user import User
from grievance.services.auth_service import AuthService, current_identity
from grievance.utils.request import get_json_body

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/register', methods=['POST'])
@limiter.limit("5 per hour")
def register():
    """Register a new student or admin account"""
    data = get_json_body()

    user = AuthService.register(
        full_name=data.get('full_name'),
        email=data.get('email'),
        password=data.get('password'),
        role=data.get('role'),
    )

    return jsonify({
        'message': 'User registered successfully',
        'user': user.to_dict()
    }), 201


@auth_bp.route('/login', methods=['POST'])
@limiter.limit("50 per hour")
def login():
    """Exchange email and password for a bearer token"""
    data = get_json_body()

    _, user = AuthService.authenticate(data.get('email'), data.get('password'))
    token = AuthService.issue_token(user)

    return jsonify({
        'message': 'Login successful',
        'token': token,
        'user': user.to_dict()
    }), 200


@auth_bp.route('/me', methods=['GET'])
@jwt_required()
def me():
    """Get the authenticated user's profile"""
    identity = current_identity()
    user = db.session.get(User, identity.id)
    if not user:
        raise NotFoundError('User not found')

    return jsonify({'user': user.to_dict()}), 200
