from extensions import db
from grievance.models.user import User, UserRole
from grievance.services.auth_service import AuthService, Identity


def register_payload(**overrides):
    payload = {
        'full_name': 'Asha Rao',
        'email': 'asha@college.edu',
        'password': 'secret123',
        'role': 'student',
    }
    payload.update(overrides)
    return payload


def test_register_user(client):
    response = client.post('/api/auth/register', json=register_payload())

    assert response.status_code == 201
    user = response.get_json()['user']
    assert user['email'] == 'asha@college.edu'
    assert user['role'] == 'student'
    assert 'password_hash' not in user


def test_register_normalizes_email(client):
    client.post('/api/auth/register', json=register_payload(email='  Asha@College.EDU '))

    assert User.query.filter_by(email='asha@college.edu').count() == 1


def test_register_duplicate_email(client):
    client.post('/api/auth/register', json=register_payload())
    response = client.post('/api/auth/register', json=register_payload(full_name='Someone Else'))

    assert response.status_code == 400
    body = response.get_json()
    assert body['error'] == 'validation_error'
    assert 'already registered' in body['message']


def test_register_missing_field(client):
    response = client.post('/api/auth/register', json=register_payload(password=''))

    assert response.status_code == 400
    assert 'password' in response.get_json()['message']


def test_register_unknown_role(client):
    response = client.post('/api/auth/register', json=register_payload(role='warden'))

    assert response.status_code == 400


def test_login_success(client):
    client.post('/api/auth/register', json=register_payload())

    response = client.post('/api/auth/login', json={'email': 'asha@college.edu', 'password': 'secret123'})

    assert response.status_code == 200
    data = response.get_json()
    assert data['token']
    assert data['user']['email'] == 'asha@college.edu'

    me = client.get('/api/auth/me', headers={'Authorization': f"Bearer {data['token']}"})
    assert me.status_code == 200
    assert me.get_json()['user']['full_name'] == 'Asha Rao'


def test_login_invalid_credentials(client):
    client.post('/api/auth/register', json=register_payload())

    response = client.post('/api/auth/login', json={'email': 'asha@college.edu', 'password': 'wrong'})
    assert response.status_code == 401
    assert response.get_json()['error'] == 'authentication_error'

    response = client.post('/api/auth/login', json={'email': 'nobody@college.edu', 'password': 'x'})
    assert response.status_code == 401


def test_login_deactivated_account(client, student):
    student.is_active = False
    db.session.commit()

    response = client.post('/api/auth/login', json={'email': student.email, 'password': 'testpassword123'})

    assert response.status_code == 403


def test_protected_route_without_token(client):
    response = client.get('/api/complaints/my-complaints')

    assert response.status_code == 401
    assert response.get_json()['error'] == 'authentication_error'


def test_protected_route_with_garbage_token(client):
    response = client.get('/api/complaints/my-complaints', headers={'Authorization': 'Bearer not-a-jwt'})

    assert response.status_code == 401


def test_authorize(admin_identity, student_identity):
    assert AuthService.authorize(admin_identity, UserRole.STUDENT)
    assert AuthService.authorize(admin_identity, 'admin')
    assert AuthService.authorize(student_identity, 'student')
    assert not AuthService.authorize(student_identity, 'admin')
    assert not AuthService.authorize(None, 'student')


def test_identity_from_user(admin):
    identity = Identity.from_user(admin)

    assert identity.id == admin.id
    assert identity.role == 'admin'
    assert identity.is_admin


def test_deactivated_user_token_is_rejected(client, student, student_headers):
    student.is_active = False
    db.session.commit()

    response = client.post('/api/complaints', json={
        'title': 'Broken AC',
        'description': 'Room 204',
        'category': 'hostel',
    }, headers=student_headers)

    assert response.status_code == 401
    assert response.get_json()['error'] == 'authentication_error'


def test_deactivated_admin_token_is_rejected(client, admin, admin_headers):
    admin.is_active = False
    db.session.commit()

    assert client.get('/api/complaints', headers=admin_headers).status_code == 401


def test_role_is_read_from_account(client, student, student_headers):
    student.role = UserRole.ADMIN
    db.session.commit()

    assert client.get('/api/complaints', headers=student_headers).status_code == 200
