# coding=utf-8
import ast
import importlib
import os
import tempfile

import falcon
from falcon import testing
import pytest

from crudgen.core import exceptions
from crudgen.tools import project

from tests import make_project

CRUD_ROUTES = [('GET', '/', 'list'), ('GET', '/:id', 'show'), ('POST', '/', 'create'),
               ('PUT', '/:id', 'update'), ('DELETE', '/:id', 'remove')]


def _controller_calls(source, controller_name):
    calls = []
    for node in ast.walk(ast.parse(source)):
        if isinstance(node, ast.Call) and isinstance(node.func, ast.Attribute) and \
                isinstance(node.func.value, ast.Name) and node.func.value.id == controller_name:
            calls.append((node.func.attr, [arg.id for arg in node.args]))
    return sorted(calls)


def test_create():
    temppath = tempfile.mkdtemp()
    root = project.create_project(temppath, 'test', '1.0', 'test', 'test@test.com', './etc')
    written = project.create_resource(temppath, 'test', 'user')
    assert root == os.path.join(temppath, 'test')
    for filename in ('requirements.txt', 'etc/test.conf', 'test/__init__.py', 'test/routes/__init__.py',
                     'test/controllers/__init__.py', 'test/server/__init__.py', 'test/server/wsgi_server.py',
                     'test/server/simple_server.py', 'test/routes/user.py', 'test/controllers/user.py'):
        assert os.path.isfile(os.path.join(root, filename))
    assert written == [os.path.join(root, 'test', 'controllers', 'user.py'),
                       os.path.join(root, 'test', 'routes', 'user.py')]


@pytest.mark.parametrize('name', ['users', 'Cat', 'order_items'])
def test_render_router(name):
    source = project.render_router(name)
    tree = ast.parse(source)
    imports = [node for node in tree.body if isinstance(node, ast.ImportFrom)]
    assert any(node.level == 2 and node.module == 'controllers' and [a.name for a in node.names] == [name]
               for node in imports)
    assert _controller_calls(source, name) == sorted([
        ('create', ['req', 'resp']),
        ('list', ['req', 'resp']),
        ('remove', ['req', 'resp', 'id']),
        ('show', ['req', 'resp', 'id']),
        ('update', ['req', 'resp', 'id']),
    ])
    assert "prefix='/%s'" % name in source
    assert '${' not in source


def test_render_controller():
    source = project.render_controller('users')
    tree = ast.parse(source)
    functions = [node.name for node in tree.body if isinstance(node, ast.FunctionDef)]
    assert functions == ['list', 'show', 'create', 'update', 'remove']


@pytest.mark.parametrize('name', ['', '1users', 'user-s', '_users', 'class', 'router', 'add_routes', 'on_show',
                                  'req', 'resp', 'id'])
def test_invalid_name(name):
    with pytest.raises(exceptions.ValidationError):
        project.render_router(name)


def test_template_not_found():
    with pytest.raises(exceptions.NotFoundError):
        project.get_template('routes.tpl_nothing')


def test_generated_router_routes(monkeypatch):
    make_project(monkeypatch, 'genapp_routes', 'users')
    routes = importlib.import_module('genapp_routes.routes.users')
    controller = importlib.import_module('genapp_routes.controllers.users')
    assert [(r.method, r.path) for r in routes.router.routes] == [(m, p) for m, p, _ in CRUD_ROUTES]
    assert routes.users is controller


def test_generated_router_forwards(monkeypatch, mocker):
    make_project(monkeypatch, 'genapp_forward', 'users')
    routes = importlib.import_module('genapp_forward.routes.users')
    controller = importlib.import_module('genapp_forward.controllers.users')
    mocks = {}
    for _, _, name in CRUD_ROUTES:
        mocks[name] = mocker.patch.object(controller, name)

    api = falcon.App()
    assert routes.add_routes(api) == ['/users', '/users/{id}']
    client = testing.TestClient(api)

    result = client.simulate_get('/users')
    assert result.status_code == 200
    assert result.text == ''
    req, resp = mocks['list'].call_args[0]
    assert isinstance(req, falcon.Request)
    assert isinstance(resp, falcon.Response)
    assert req.path == '/users'

    client.simulate_get('/users/007')
    req, resp, rid = mocks['show'].call_args[0]
    assert rid == '007'
    assert req.method == 'GET'

    client.simulate_post('/users', json={'name': 'tom'})
    req, resp = mocks['create'].call_args[0]
    assert req.content_type.startswith('application/json')

    client.simulate_put('/users/abc-XYZ_1', json={'name': 'jerry'})
    req, resp, rid = mocks['update'].call_args[0]
    assert rid == 'abc-XYZ_1'

    client.simulate_delete('/users/-1')
    req, resp, rid = mocks['remove'].call_args[0]
    assert rid == '-1'

    for name, mock in mocks.items():
        assert mock.call_count == 1, name
    assert client.simulate_patch('/users/1').status_code == 405


def test_generated_router_custom_prefix(monkeypatch):
    make_project(monkeypatch, 'genapp_prefix', 'cats')
    routes = importlib.import_module('genapp_prefix.routes.cats')
    api = falcon.App()
    assert routes.add_routes(api, '/v1/cats') == ['/v1/cats', '/v1/cats/{id}']
    client = testing.TestClient(api)
    result = client.simulate_get('/v1/cats')
    assert result.json == {'count': 0, 'data': []}


def test_resource_conflict():
    temppath = tempfile.mkdtemp()
    project.create_project(temppath, 'conflict', '1.0', 'test', 'test@test.com', './etc')
    project.create_resource(temppath, 'conflict', 'users')
    controller_file = os.path.join(temppath, 'conflict', 'conflict', 'controllers', 'users.py')
    with open(controller_file, 'w') as f:
        f.write('# edited\n')
    with pytest.raises(exceptions.ConflictError):
        project.create_resource(temppath, 'conflict', 'users')
    written = project.create_resource(temppath, 'conflict', 'users', force=True)
    assert controller_file in written
    with open(controller_file) as f:
        assert f.read() != '# edited\n'


def test_resource_keeps_existing_controller():
    temppath = tempfile.mkdtemp()
    src_dir = os.path.join(temppath, 'keep', 'keep')
    os.makedirs(os.path.join(src_dir, 'controllers'))
    controller_file = os.path.join(src_dir, 'controllers', 'users.py')
    with open(controller_file, 'w') as f:
        f.write('# handwritten\n')
    written = project.create_resource(temppath, 'keep', 'users')
    assert written == [os.path.join(src_dir, 'routes', 'users.py')]
    with open(controller_file) as f:
        assert f.read() == '# handwritten\n'
    assert os.path.isfile(os.path.join(src_dir, 'controllers', '__init__.py'))


def test_input_var_with_check(monkeypatch):
    answers = iter(['1bad', 'good_name'])
    monkeypatch.setattr('builtins.input', lambda prompt: next(answers))
    assert project.input_var_with_check('name: ') == 'good_name'

    monkeypatch.setattr('builtins.input', lambda prompt: 'bad-name')
    with pytest.raises(SystemExit) as e:
        project.input_var_with_check('name: ', max_try=2)
    assert e.value.code == 1


def test_generate(monkeypatch):
    temppath = tempfile.mkdtemp()
    answers = iter([temppath, 'cliapp', 'project', '1.0', 'test', 'test@test.com', './etc',
                    'resource', 'users', 'quit'])
    monkeypatch.setattr('builtins.input', lambda prompt: next(answers))
    with pytest.raises(SystemExit) as e:
        project.generate()
    assert e.value.code == 0
    assert os.path.isfile(os.path.join(temppath, 'cliapp', 'cliapp', 'routes', 'users.py'))


@pytest.mark.parametrize('name', ['req', 'resp', 'id'])
def test_handler_argument_name_rejected(name):
    temppath = tempfile.mkdtemp()
    project.create_project(temppath, 'argapp', '1.0', 'test', 'test@test.com', './etc')
    with pytest.raises(exceptions.ValidationError):
        project.create_resource(temppath, 'argapp', name)
    assert not os.path.exists(os.path.join(temppath, 'argapp', 'argapp', 'routes', name + '.py'))


def test_messages_translated(monkeypatch):
    monkeypatch.setattr(project, '_', lambda value: u'[zh] ' + value)
    with pytest.raises(exceptions.ValidationError) as e:
        project.check_name('class')
    assert '[zh] class is a python keyword' in str(e.value)

    temppath = tempfile.mkdtemp()
    project.create_resource(temppath, 'i18napp', 'users')
    with pytest.raises(exceptions.ConflictError) as e:
        project.create_resource(temppath, 'i18napp', 'users')
    assert '[zh] router' in str(e.value)
