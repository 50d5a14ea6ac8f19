"""
User Model
"""

from extensions import db, bcrypt
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    """User roles enum"""
    STUDENT = 'student'
    ADMIN = 'admin'


class User(db.Model):
    """User model for authentication and complaint ownership"""

    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    role = db.Column(
        db.Enum(UserRole, name='user_role', values_callable=lambda e: [m.value for m in e]),
        default=UserRole.STUDENT,
        nullable=False
    )
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    last_login = db.Column(db.DateTime)

    # Relationships
    complaints = db.relationship('Complaint', backref='student', lazy='dynamic',
                                 cascade='all, delete-orphan',
                                 foreign_keys='Complaint.student_id')

    def __init__(self, full_name, email, password, role=UserRole.STUDENT, **kwargs):
        """Initialize user with hashed password"""
        self.full_name = full_name
        self.email = email
        self.set_password(password)
        self.role = UserRole(role)
        self.is_active = True

        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def set_password(self, password):
        """Hash and set password"""
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        """Verify password against hash"""
        return bcrypt.check_password_hash(self.password_hash, password)

    def update_last_login(self):
        """Update last login timestamp"""
        self.last_login = datetime.utcnow()
        db.session.commit()

    @property
    def is_admin(self):
        return self.role == UserRole.ADMIN

    def to_dict(self):
        """Convert user to dictionary"""
        return {
            'id': self.id,
            'full_name': self.full_name,
            'email': self.email,
            'role': self.role.value,
            'is_active': self.is_active,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<User {self.email}>'
