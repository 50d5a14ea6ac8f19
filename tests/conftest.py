"""
Grievance Tracker - Test Configuration and Fixtures
"""
import pytest
from faker import Faker

from grievance import create_app
from extensions import db
from grievance.models.user import User, UserRole
from grievance.services.auth_service import AuthService, Identity

fake = Faker()


@pytest.fixture
def app():
    """Fresh application with an empty in-memory database"""
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def complaint_service(app):
    return app.extensions['complaint_service']


def _make_user(role, password='testpassword123'):
    user = User(
        full_name=fake.name(),
        email=fake.unique.email(),
        password=password,
        role=role,
    )
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def student(app):
    """Create a student test user"""
    return _make_user(UserRole.STUDENT)


@pytest.fixture
def other_student(app):
    return _make_user(UserRole.STUDENT)


@pytest.fixture
def admin(app):
    """Create an admin test user"""
    return _make_user(UserRole.ADMIN, password='adminpassword123')


@pytest.fixture
def student_identity(student):
    return Identity.from_user(student)


@pytest.fixture
def other_identity(other_student):
    return Identity.from_user(other_student)


@pytest.fixture
def admin_identity(admin):
    return Identity.from_user(admin)


def _headers(user):
    return {'Authorization': f'Bearer {AuthService.issue_token(user)}'}


@pytest.fixture
def student_headers(student):
    return _headers(student)


@pytest.fixture
def other_headers(other_student):
    return _headers(other_student)


@pytest.fixture
def admin_headers(admin):
    return _headers(admin)


@pytest.fixture
def complaint(complaint_service, student):
    """A pending complaint owned by ``student``"""
    return complaint_service.submit(
        student_id=student.id,
        title='Broken AC',
        description='The air conditioner in room 204 has stopped working.',
        category='hostel',
        priority='high',
    )
