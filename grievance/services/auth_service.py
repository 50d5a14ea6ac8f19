"""
Authentication Service
Resolves identities from credentials and tokens; never touches complaint data
"""

from dataclasses import dataclass

from flask import current_app
from flask_jwt_extended import create_access_token, get_current_user
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from extensions import db
from grievance.errors import (
    AuthenticationError,
    AuthorizationError,
    PersistenceError,
    ValidationError,
)
from grievance.models.user import User, UserRole


@dataclass(frozen=True)
class Identity:
    """Authenticated caller passed explicitly into every service call"""
    id: int
    role: str

    @property
    def is_admin(self):
        return self.role == UserRole.ADMIN.value

    @classmethod
    def from_user(cls, user):
        return cls(id=user.id, role=user.role.value)


def current_identity():
    """Identity of the active account behind the current request's verified JWT"""
    return Identity.from_user(get_current_user())


class AuthService:
    """Registration, login and role checks"""

    @staticmethod
    def register(full_name, email, password, role):
        """Create a new account; email must be unique"""
        values = {
            'full_name': full_name,
            'email': email,
            'password': password,
            'role': role,
        }
        for field, value in values.items():
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f'{field} is required')

        email = email.strip().lower()
        try:
            role = UserRole(role.strip().lower())
        except ValueError:
            raise ValidationError('role must be one of: student, admin')

        if User.query.filter_by(email=email).first():
            raise ValidationError('Email already registered')

        user = User(full_name=full_name.strip(), email=email, password=password, role=role)
        try:
            db.session.add(user)
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise ValidationError('Email already registered')
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f'Failed to register user: {str(e)}')
            raise PersistenceError(detail=str(e))

        current_app.logger.info(f'Registered {user.role.value} account {user.id}')
        return user

    @staticmethod
    def authenticate(email, password):
        """Verify credentials and return (Identity, User)"""
        if not email or not password:
            raise ValidationError('Email and password are required')

        user = User.query.filter_by(email=email.strip().lower()).first()
        if not user or not user.check_password(password):
            raise AuthenticationError('Invalid email or password')

        if not user.is_active:
            raise AuthorizationError('Account is deactivated')

        user.update_last_login()
        return Identity.from_user(user), user

    @staticmethod
    def authorize(identity, required_role):
        """Admins satisfy every role; otherwise the roles must match"""
        if identity is None:
            return False
        if identity.is_admin:
            return True
        return identity.role == UserRole(required_role).value

    @staticmethod
    def issue_token(user):
        return create_access_token(
            identity=str(user.id),
            additional_claims={'role': user.role.value}
        )
