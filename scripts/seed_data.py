"""
Seed the default admin account and complaint categories
Usage: python scripts/seed_data.py
"""

import sys
import os

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from grievance import create_app
from extensions import db
from grievance.models.user import User, UserRole
from grievance.services.category_service import CategoryService


def seed_admin(app):
    email = app.config['SEED_ADMIN_EMAIL'].strip().lower()
    if User.query.filter_by(email=email).first():
        return False

    admin = User(
        full_name='System Admin',
        email=email,
        password=app.config['SEED_ADMIN_PASSWORD'],
        role=UserRole.ADMIN,
    )
    db.session.add(admin)
    db.session.commit()
    return True


def seed(config_name=None):
    app = create_app(config_name)

    with app.app_context():
        if seed_admin(app):
            print(f"Default admin account created: {app.config['SEED_ADMIN_EMAIL']}")
        else:
            print("Default admin account already exists")

        added = CategoryService.seed_defaults()
        print(f"Seeded {added} default categories")


if __name__ == '__main__':
    seed()
