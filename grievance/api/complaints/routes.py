"""
Complaint Routes
"""

from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from grievance.errors import AuthorizationError, NotFoundError
from grievance.services import AnalyticsService, current_identity, get_complaint_service
from grievance.utils.decorators import admin_required
from grievance.utils.request import get_json_body

complaints_bp = Blueprint('complaints', __name__)


@complaints_bp.route('', methods=['POST'])
@jwt_required()
def submit_complaint():
    """Submit a new complaint"""
    identity = current_identity()
    data = get_json_body()

    complaint = get_complaint_service().submit(
        student_id=identity.id,
        title=data.get('title'),
        description=data.get('description'),
        category=data.get('category'),
        priority=data.get('priority'),
    )

    return jsonify({
        'message': 'Complaint submitted successfully',
        'complaint': complaint.to_dict()
    }), 201


@complaints_bp.route('/my-complaints', methods=['GET'])
@jwt_required()
def get_my_complaints():
    """Get the current student's complaints, newest first"""
    identity = current_identity()
    complaints = get_complaint_service().list_for_student(identity.id)

    return jsonify({
        'complaints': [complaint.to_dict() for complaint in complaints]
    }), 200


@complaints_bp.route('', methods=['GET'])
@admin_required()
def get_all_complaints():
    """Get every complaint (admin only)"""
    complaints = get_complaint_service().list_all(current_identity())

    return jsonify({
        'complaints': [complaint.to_dict(include_student=True) for complaint in complaints]
    }), 200


@complaints_bp.route('/analytics', methods=['GET'])
@admin_required()
def get_analytics():
    """Aggregate complaint statistics (admin only)"""
    return jsonify(AnalyticsService.compute(current_identity())), 200


@complaints_bp.route('/feedback', methods=['GET'])
@admin_required()
def get_all_feedback():
    """Get every complaint that carries student feedback (admin only)"""
    complaints = get_complaint_service().list_feedback(current_identity())

    return jsonify({
        'feedback': [complaint.to_dict(include_student=True) for complaint in complaints]
    }), 200


@complaints_bp.route('/<int:complaint_id>', methods=['GET'])
@jwt_required()
def get_complaint(complaint_id):
    """Get complaint details (owner or admin)"""
    complaint = get_complaint_service().get_complaint(current_identity(), complaint_id)

    return jsonify({'complaint': complaint.to_dict(include_student=True)}), 200


@complaints_bp.route('/<int:complaint_id>/status', methods=['PUT'])
@admin_required()
def update_complaint_status(complaint_id):
    """Change a complaint's status (admin only)"""
    data = get_json_body()

    complaint = get_complaint_service().transition_status(
        current_identity(), complaint_id, data.get('status')
    )

    return jsonify({
        'message': 'Status updated',
        'complaint': complaint.to_dict(include_student=True)
    }), 200


@complaints_bp.route('/<int:complaint_id>/feedback', methods=['PUT'])
@jwt_required()
def add_feedback(complaint_id):
    """Leave feedback on a resolved complaint (owner only)"""
    data = get_json_body()

    try:
        complaint = get_complaint_service().attach_feedback(
            current_identity(), complaint_id, data.get('feedback')
        )
    except (AuthorizationError, NotFoundError):
        # Do not reveal whether someone else's complaint exists
        raise NotFoundError('Complaint not found or unauthorized')

    return jsonify({
        'message': 'Feedback submitted',
        'complaint': complaint.to_dict()
    }), 200


@complaints_bp.route('/<int:complaint_id>/history', methods=['GET'])
@admin_required()
def get_complaint_history(complaint_id):
    """Get the status history of a complaint (admin only)"""
    history = get_complaint_service().history_for(current_identity(), complaint_id)

    return jsonify({'history': [entry.to_dict() for entry in history]}), 200
