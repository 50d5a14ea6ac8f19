from grievance.errors import NotFoundError, PersistenceError, ValidationError


def test_error_payload_shape():
    error = ValidationError('title is required')

    assert error.status_code == 400
    assert error.to_dict() == {'error': 'validation_error', 'message': 'title is required'}


def test_default_message():
    assert NotFoundError().message == 'Resource not found'


def test_persistence_detail_hidden_outside_debug(app, client):
    @app.route('/boom')
    def boom():
        raise PersistenceError(detail='no such table: complaints')

    response = client.get('/boom')

    assert response.status_code == 500
    assert response.get_json() == {
        'error': 'persistence_error',
        'message': 'An unexpected error occurred',
    }


def test_persistence_detail_shown_in_debug(app, client):
    @app.route('/boom')
    def boom():
        raise PersistenceError(detail='no such table: complaints')

    app.debug = True
    response = client.get('/boom')

    assert response.get_json()['detail'] == 'no such table: complaints'


def test_unhandled_exception_is_opaque(app, client):
    @app.route('/crash')
    def crash():
        raise RuntimeError('secret internals')

    response = client.get('/crash')

    assert response.status_code == 500
    assert 'secret internals' not in response.get_data(as_text=True)


def test_unknown_route_returns_json(client):
    response = client.get('/api/nothing-here')

    assert response.status_code == 404
    assert response.get_json()['error'] == 'Not Found'
