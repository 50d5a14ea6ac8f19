import pytest

from grievance.errors import AuthorizationError, NotFoundError, ValidationError
from grievance.models.category import Category
from grievance.services.category_service import CategoryService, DEFAULT_CATEGORIES


def test_seed_defaults_is_idempotent(app):
    assert CategoryService.seed_defaults() == len(DEFAULT_CATEGORIES)
    assert CategoryService.seed_defaults() == 0
    assert Category.query.count() == len(DEFAULT_CATEGORIES)


def test_create_category(admin_identity):
    category = CategoryService.create_category(admin_identity, {
        'name': ' Sports ',
        'description': 'Gym and grounds',
        'department': 'Sports Office',
        'priority_level': 'Medium',
    })

    assert category.name == 'Sports'
    assert category.priority_level == 'medium'
    assert category.is_active is True


def test_create_category_validation(admin_identity):
    with pytest.raises(ValidationError):
        CategoryService.create_category(admin_identity, {'description': 'no name'})

    with pytest.raises(ValidationError):
        CategoryService.create_category(admin_identity, {'name': 'Gym', 'priority_level': 'urgent'})

    CategoryService.create_category(admin_identity, {'name': 'Gym'})
    with pytest.raises(ValidationError):
        CategoryService.create_category(admin_identity, {'name': 'Gym'})


def test_create_category_requires_admin(student_identity):
    with pytest.raises(AuthorizationError):
        CategoryService.create_category(student_identity, {'name': 'Gym'})


def test_update_and_deactivate(admin_identity):
    category = CategoryService.create_category(admin_identity, {'name': 'Gym'})

    updated = CategoryService.update_category(admin_identity, category.id, {'department': 'Sports'})
    assert updated.department == 'Sports'

    CategoryService.deactivate_category(admin_identity, category.id)
    assert CategoryService.list_categories() == []
    assert [c.name for c in CategoryService.list_categories(include_inactive=True)] == ['Gym']


def test_update_unknown_category(admin_identity):
    with pytest.raises(NotFoundError):
        CategoryService.update_category(admin_identity, 42, {'name': 'Nope'})


def test_category_routes(client, admin_headers, student_headers):
    response = client.post('/api/complaints/categories', json={'name': 'Hostel'},
                           headers=admin_headers)
    assert response.status_code == 201
    category_id = response.get_json()['category']['id']

    response = client.post('/api/complaints/categories', json={'name': 'Mess'},
                           headers=student_headers)
    assert response.status_code == 403

    response = client.get('/api/complaints/categories', headers=student_headers)
    assert response.status_code == 200
    assert [c['name'] for c in response.get_json()['categories']] == ['Hostel']

    response = client.put(f'/api/complaints/categories/{category_id}',
                          json={'description': 'Rooms and wardens'}, headers=admin_headers)
    assert response.status_code == 200
    assert response.get_json()['category']['description'] == 'Rooms and wardens'

    response = client.delete(f'/api/complaints/categories/{category_id}', headers=admin_headers)
    assert response.status_code == 200
    assert response.get_json()['category']['is_active'] is False

    response = client.get('/api/complaints/categories?all=true', headers=admin_headers)
    assert len(response.get_json()['categories']) == 1
