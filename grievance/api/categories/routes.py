"""
Category Routes
"""

from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from grievance.services import CategoryService, current_identity
from grievance.utils.decorators import admin_required
from grievance.utils.request import get_json_body

categories_bp = Blueprint('categories', __name__)


@categories_bp.route('', methods=['GET'])
@jwt_required()
def get_categories():
    """List active categories; admins may pass ?all=true for inactive ones too"""
    identity = current_identity()
    include_inactive = identity.is_admin and request.args.get('all', '').lower() == 'true'
    categories = CategoryService.list_categories(include_inactive=include_inactive)

    return jsonify({
        'categories': [category.to_dict() for category in categories]
    }), 200


@categories_bp.route('', methods=['POST'])
@admin_required()
def add_category():
    """Create a category (admin only)"""
    data = get_json_body()
    category = CategoryService.create_category(current_identity(), data)

    return jsonify({
        'message': 'Category created',
        'category': category.to_dict()
    }), 201


@categories_bp.route('/<int:category_id>', methods=['PUT'])
@admin_required()
def update_category(category_id):
    """Update a category (admin only)"""
    data = get_json_body()
    category = CategoryService.update_category(current_identity(), category_id, data)

    return jsonify({
        'message': 'Category updated',
        'category': category.to_dict()
    }), 200


@categories_bp.route('/<int:category_id>', methods=['DELETE'])
@admin_required()
def delete_category(category_id):
    """Deactivate a category (admin only)"""
    category = CategoryService.deactivate_category(current_identity(), category_id)

    return jsonify({
        'message': 'Category deactivated',
        'category': category.to_dict()
    }), 200
