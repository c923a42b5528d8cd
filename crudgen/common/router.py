# coding=utf-8
"""
本模块提供路由表功能，按(HTTP方法, 路径)注册处理函数，并挂载到falcon应用

eg.
    router = Router()

    @router.get('/:id')
    def on_show(req, resp, id):
        ...

    router.mount(api, '/users')  # => GET /users/{id}

"""

import collections
import logging
import re

from crudgen.core import exceptions
from crudgen.core.i18n import _

LOG = logging.getLogger(__name__)

SUPPORTED_METHODS = ('GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'HEAD', 'OPTIONS')
PARAM_RULE = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_]*$')

Route = collections.namedtuple('Route', ['method', 'path', 'handler'])


class RouteResource(object):
    """
    falcon资源对象，一个路径对应一个资源，每个注册的HTTP方法对应一个on_<method>响应函数

    响应函数直接转发(req, resp, **params)，不对请求/响应做任何处理
    """

    def __init__(self, uri_template):
        self.uri_template = uri_template
        self.methods = []

    def add_handler(self, method, handler):
        setattr(self, 'on_%s' % method.lower(), handler)
        self.methods.append(method)

    def __repr__(self):
        return '<RouteResource(%s, %s)>' % (self.uri_template, ','.join(self.methods))


class Router(object):
    """路由表"""

    def __init__(self):
        self._routes = collections.OrderedDict()

    @property
    def routes(self):
        return list(self._routes.values())

    def __len__(self):
        return len(self._routes)

    def __iter__(self):
        return iter(self.routes)

    @staticmethod
    def _validate_path(path):
        if not path or not path.startswith('/'):
            raise exceptions.ValidationError(attribute='path', msg=_('path must start with "/": %s') % path)
        for segment in path.split('/'):
            if segment.startswith(':') and not PARAM_RULE.match(segment[1:]):
                raise exceptions.ValidationError(attribute='path',
                                                 msg=_('invalid path parameter "%s" in %s') % (segment, path))

    def add(self, method, path, handler):
        """
        注册路由

        :param method: HTTP方法
        :type method: str
        :param path: 路径，使用:name表示路径参数，eg. /:id
        :type path: str
        :param handler: 处理函数，handler(req, resp, **params)
        :type handler: callable
        :returns: handler
        :raises: ValidationError, ConflictError
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise exceptions.ValidationError(attribute='method', msg=_('unsupported http method: %s') % method)
        self._validate_path(path)
        key = (method, path)
        if key in self._routes:
            raise exceptions.ConflictError(msg=_('route %s %s already registered') % key)
        self._routes[key] = Route(method, path, handler)
        return handler

    def route(self, method, path):
        def _route(handler):
            return self.add(method, path, handler)
        return _route

    def get(self, path):
        return self.route('GET', path)

    def post(self, path):
        return self.route('POST', path)

    def put(self, path):
        return self.route('PUT', path)

    def patch(self, path):
        return self.route('PATCH', path)

    def delete(self, path):
        return self.route('DELETE', path)

    @staticmethod
    def to_uri_template(prefix, path):
        """
        将前缀与:name风格的路径合并为falcon的uri模板

        eg. ('/users', '/') => '/users', ('/users', '/:id') => '/users/{id}', ('', '/') => '/'
        """
        segments = []
        for part in (prefix or '', path):
            for segment in part.split('/'):
                if not segment:
                    continue
                if segment.startswith(':'):
                    segment = '{%s}' % segment[1:]
                segments.append(segment)
        return '/' + '/'.join(segments)

    def mount(self, api, prefix=''):
        """
        将路由表挂载到falcon应用

        :param api: falcon应用
        :type api: falcon.App
        :param prefix: 路径前缀，eg. /users
        :type prefix: str
        :returns: 已挂载的uri模板列表
        :rtype: list
        """
        resources = collections.OrderedDict()
        for route in self.routes:
            uri_template = self.to_uri_template(prefix, route.path)
            resource = resources.get(uri_template)
            if resource is None:
                resource = resources[uri_template] = RouteResource(uri_template)
            resource.add_handler(route.method, route.handler)
        for uri_template, resource in resources.items():
            LOG.debug('mount route: %s %s', ','.join(resource.methods), uri_template)
            api.add_route(uri_template, resource)
        return list(resources.keys())
