# coding=utf-8
"""
本模块提供服务相关初始化

"""

from collections import OrderedDict
import importlib
import json
import logging

import falcon

from crudgen.core import config
from crudgen.core import exceptions
from crudgen.core import i18n
from crudgen.core import logging as mylogger
from crudgen.core import utils

LOG = logging.getLogger(__name__)


class EnhancedHTTPError(falcon.HTTPError):

    def __init__(self, status, title=None, description=None, headers=None, code=None, extra_data=None):
        super(EnhancedHTTPError, self).__init__(status, title=title, description=description,
                                                headers=headers, code=code)
        self._extra_data = extra_data or {}

    def to_dict(self, obj_type=dict):
        obj = obj_type()
        obj['title'] = self.title
        if self.description is not None:
            obj['description'] = self.description
        if self.code is not None:
            obj['code'] = self.code
        if self._extra_data:
            obj.update(self._extra_data)
        return obj

    def to_json(self, handler=None):
        data = self.to_dict(OrderedDict)
        return json.dumps(data, cls=utils.ComplexEncoder)


def error_http_exception(req, resp, ex, params):
    """捕获并转换内部Exception为falcon Exception"""
    exception_data = None
    if isinstance(ex, falcon.HTTPStatus):
        # falcon中redirect作为异常抛出，但不需要额外处理
        raise ex
    LOG.exception(ex)
    if isinstance(ex, falcon.HTTPError):
        code = falcon.http_status_to_code(ex.status)
        title = ex.title
        description = title if ex.description is None else ex.description
    elif isinstance(ex, exceptions.Error):
        # 抛出框架异常，通常是用户有意为之
        code = ex.code
        title = ex.title
        description = ex.message
        exception_data = ex.exception_data
    else:
        code = 500
        title = 'Internal Server Error'
        description = str(ex)
    http_status = getattr(falcon, 'HTTP_' + str(code), falcon.HTTP_500)
    headers = ex.headers if isinstance(ex, falcon.HTTPError) else None
    raise EnhancedHTTPError(http_status,
                            title=title,
                            description=description,
                            headers=headers,
                            code=code,
                            extra_data=exception_data)


def error_serializer(req, resp, exception):
    """将Exception信息转换为json格式返回"""
    representation = exception.to_json()
    # falcon.HTTPError.to_json返回bytes
    if isinstance(representation, bytes):
        resp.data = representation
    else:
        resp.text = representation
    resp.content_type = falcon.MEDIA_JSON


def initialize_config(path, dir_path=None):
    """初始化配置"""
    config.setup(path, dir_path=dir_path)


def initialize_logger():
    """初始化日志配置"""
    mylogger.setup()


def initialize_i18n(appname):
    """初始化国际化配置"""
    i18n._.setup(appname, config.CONF.locale_path, config.CONF.language)


def _parse_router_option(option):
    """
    解析application.routers配置项

    :param option: 模块名，或者{"module": 模块名, "prefix": 路径前缀}
    :type option: str/dict
    :returns: (模块名, 路径前缀)
    :rtype: tuple
    """
    if utils.is_string_type(option):
        module_name, prefix = option, None
    else:
        module_name, prefix = option.get('module'), option.get('prefix')
    if not module_name:
        raise exceptions.CriticalError(msg='invalid router option: %s' % option)
    if prefix is None:
        prefix = '/' + module_name.rsplit('.', 1)[-1]
    return module_name, prefix


def initialize_applications(api, routers=None):
    """挂载路由模块，模块需导出router对象"""
    routers = config.CONF.application.routers if routers is None else routers
    mounted = []
    for option in routers:
        module_name, prefix = _parse_router_option(option)
        mod = importlib.import_module(module_name)
        router = getattr(mod, 'router', None)
        if router is None:
            raise exceptions.CriticalError(msg='module %s has no router' % module_name)
        uri_templates = router.mount(api, prefix)
        LOG.info('router %s mounted on: %s', module_name, ', '.join(uri_templates))
        mounted.extend(uri_templates)
    return mounted


def create_api(middlewares=None, routers=None):
    """创建falcon应用并挂载路由、错误处理"""
    api = falcon.App(middleware=middlewares or [])
    initialize_applications(api, routers=routers)
    # falcon按异常MRO选择最具体的处理函数，HTTPError/HTTPStatus需单独注册以覆盖默认处理
    api.add_error_handler(Exception, error_http_exception)
    api.add_error_handler(falcon.HTTPError, error_http_exception)
    api.add_error_handler(falcon.HTTPStatus, error_http_exception)
    api.set_error_serializer(error_serializer)
    return api


def initialize_server(appname, conf, conf_dir=None, middlewares=None):
    """
    初始化整个service

    初始化顺序为
    * 配置文件
    * 日志
    * 国际化
    * wsgi server(路由挂载)
    """
    initialize_config(conf, dir_path=conf_dir)
    initialize_logger()
    initialize_i18n(appname)
    return create_api(middlewares=middlewares)
