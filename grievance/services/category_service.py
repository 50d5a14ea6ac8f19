"""
Category Service
Admin-managed reference data for complaint submission
"""

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from extensions import db
from grievance.errors import AuthorizationError, NotFoundError, PersistenceError, ValidationError
from grievance.models.category import Category
from grievance.models.complaint import ComplaintPriority

DEFAULT_CATEGORIES = [
    {'name': 'Electrical', 'description': 'Electrical issues and maintenance',
     'department': 'Maintenance', 'priority_level': 'high'},
    {'name': 'Hostel', 'description': 'Hostel related complaints',
     'department': 'Hostel Admin', 'priority_level': 'medium'},
    {'name': 'Academic', 'description': 'Academic and course related issues',
     'department': 'Academic', 'priority_level': 'medium'},
    {'name': 'Transport', 'description': 'Transport and bus related issues',
     'department': 'Transport', 'priority_level': 'medium'},
    {'name': 'Canteen', 'description': 'Canteen and food related complaints',
     'department': 'Canteen', 'priority_level': 'low'},
    {'name': 'Library', 'description': 'Library services and resources',
     'department': 'Library', 'priority_level': 'low'},
    {'name': 'Lab', 'description': 'Lab equipment and facility issues',
     'department': 'Lab Admin', 'priority_level': 'high'},
    {'name': 'Other', 'description': 'Other general complaints',
     'department': None, 'priority_level': 'low'},
]

EDITABLE_FIELDS = ('name', 'description', 'department', 'priority_level', 'is_active')


def _require_admin(actor):
    if actor is None or not actor.is_admin:
        raise AuthorizationError('Admin access only')


def _clean(fields):
    """Validate and normalize category fields supplied by an admin"""
    cleaned = {key: value for key, value in fields.items() if key in EDITABLE_FIELDS}

    if 'name' in cleaned:
        name = cleaned['name']
        if not isinstance(name, str) or not name.strip():
            raise ValidationError('name is required')
        cleaned['name'] = name.strip()

    level = cleaned.get('priority_level')
    if level:
        try:
            cleaned['priority_level'] = ComplaintPriority(str(level).strip().lower()).value
        except ValueError:
            raise ValidationError('priority_level must be one of: low, medium, high')

    if 'is_active' in cleaned:
        cleaned['is_active'] = bool(cleaned['is_active'])
    return cleaned


class CategoryService:

    @staticmethod
    def list_categories(include_inactive=False):
        query = Category.query
        if not include_inactive:
            query = query.filter_by(is_active=True)
        return query.order_by(Category.name.asc()).all()

    @staticmethod
    def create_category(actor, fields):
        _require_admin(actor)
        if 'name' not in fields:
            raise ValidationError('name is required')
        cleaned = _clean(fields)

        if Category.query.filter_by(name=cleaned['name']).first():
            raise ValidationError('Category already exists')

        category = Category(**cleaned)
        CategoryService._save(category, 'create category')
        return category

    @staticmethod
    def update_category(actor, category_id, fields):
        _require_admin(actor)
        category = CategoryService._get_or_404(category_id)
        cleaned = _clean(fields)

        if 'name' in cleaned and cleaned['name'] != category.name:
            if Category.query.filter_by(name=cleaned['name']).first():
                raise ValidationError('Category already exists')

        for key, value in cleaned.items():
            setattr(category, key, value)
        CategoryService._save(category, 'update category')
        return category

    @staticmethod
    def deactivate_category(actor, category_id):
        """Hide a category from new submissions; existing complaints keep their label"""
        _require_admin(actor)
        category = CategoryService._get_or_404(category_id)
        category.is_active = False
        CategoryService._save(category, 'deactivate category')
        return category

    @staticmethod
    def seed_defaults():
        """Insert any missing default category; returns how many were added"""
        existing = {name for (name,) in db.session.query(Category.name).all()}
        added = 0
        for values in DEFAULT_CATEGORIES:
            if values['name'] not in existing:
                db.session.add(Category(**values))
                added += 1
        if added:
            db.session.commit()
        return added

    @staticmethod
    def _get_or_404(category_id):
        category = db.session.get(Category, category_id)
        if category is None:
            raise NotFoundError('Category not found')
        return category

    @staticmethod
    def _save(category, action):
        try:
            db.session.add(category)
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise ValidationError('Category already exists')
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f'Failed to {action}: {str(e)}')
            raise PersistenceError(detail=str(e))
