"""
Script to make a user admin
Usage: python scripts/make_admin.py user@example.com
"""

import sys
import os

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from grievance import create_app
from extensions import db
from grievance.models.user import User, UserRole


def make_admin(email):
    """Promote a user to the admin role by email"""
    app = create_app()

    with app.app_context():
        user = User.query.filter_by(email=email.strip().lower()).first()

        if not user:
            print(f"User with email '{email}' not found")
            print("\nAvailable users:")
            for u in User.query.order_by(User.email).all():
                print(f"   - {u.email} ({u.full_name}, {u.role.value})")
            return False

        if user.is_admin:
            print(f"User '{email}' is already an admin")
            return True

        user.role = UserRole.ADMIN
        db.session.commit()

        print(f"Successfully made '{email}' an admin")
        print(f"   Name: {user.full_name}")
        print(f"   Role: {user.role.value}")
        return True


if __name__ == '__main__':
    if len(sys.argv) < 2:
        print("Usage: python scripts/make_admin.py <email>")
        print("Example: python scripts/make_admin.py admin@college.edu")
        sys.exit(1)

    sys.exit(0 if make_admin(sys.argv[1]) else 1)
