# coding=utf-8
"""
本模块提供配置文件选项定义以及载入功能，外部需统一通过本模块的CONF来读取配置信息

"""

from collections.abc import Mapping
import copy
import json
import functools
import re
import warnings

from mako.template import Template

from crudgen.core import utils

VAR_REGISTER = {}
CONFIG_RESERVED = ('set_options', 'from_files', 'keys', 'values', 'items', 'get', 'to_dict', '_opts',
                   '_raise_not_exist',)
NAME_RULE = re.compile('^[_a-zA-Z][_a-zA-Z0-9]*$')


def intercept(*vars):
    """
    注册变量拦截器，在variables渲染前对变量值进行二次处理(比如解密)

    被装饰函数签名为func(value, origin_value)，必须返回新值
    """

    def _intercept(func):

        @functools.wraps(func)
        def __intercept(*args, **kwargs):
            return func(*args, **kwargs)

        for var in vars:
            funcs = VAR_REGISTER.setdefault(var, [])
            funcs.append(__intercept)
        return __intercept

    return _intercept


def call_intercepters(var, value):
    funcs = VAR_REGISTER.get(var, [])
    new_value = value
    for func in funcs:
        new_value = func(new_value, value)
    return new_value


def _valid_expr(keys):
    return 'CONF.' + '.'.join([k['name'] if k.get('attr_type', True) else '["' + k['name'] + '"]' for k in keys])


def _simple_expr(keys):
    return 'CONF.' + '.'.join([k['name'] for k in keys])


def _validate(data, keys=None):
    for key, value in data.items():
        allkeys = keys[:] if keys else []
        o_key = {'name': key, 'attr_type': True}
        allkeys.append(o_key)
        if not (key.startswith('${') and key.endswith('}')):
            if not NAME_RULE.match(key) or key in CONFIG_RESERVED:
                o_key['attr_type'] = False
                warnings.warn('[config] access %s instead of %s' % (_valid_expr(allkeys), _simple_expr(allkeys)),
                              SyntaxWarning)
        if isinstance(value, Mapping):
            _validate(value, keys=allkeys)


class Config(Mapping):
    """
    一个类字典的属性访问配置类， 表示一组或者多组实际的配置项
    1. 当属性是标准变量命名且非预留函数名时，可直接a.b.c方式访问
    2. 否则可以使用a['b-1'].c访问(item方式访问时会返回Config对象)
    3. 当属性值刚好与Config已存在函数相同时，将进行函数调用而非属性访问
       保留函数名如下：set_options，from_files，keys，values，items，get，to_dict，_opts，python魔法函数
    """

    def __init__(self, opts, raise_not_exist=True, check_reserved=False):
        self._opts = opts or {}
        if check_reserved:
            _validate(self._opts)
        self._raise_not_exist = raise_not_exist

    def set_options(self, opts, check_reserved=False):
        self._opts = opts or {}
        if check_reserved:
            _validate(self._opts)

    def __repr__(self):
        return '<Config(%s, raise_not_exist=%s)>' % (str(self._opts), self._raise_not_exist)

    def __call__(self, opts, check_reserved=False):
        """用另外一个opts来重新初始化自己"""
        self.set_options(opts, check_reserved=check_reserved)

    def from_files(self, opt_files, ignore_undefined, check_reserved=False):
        """
        载入配置文件，并按照顺序进行合并配置项

        :param opt_files: 配置文件列表
        :type opt_files: list
        :param ignore_undefined: 是否忽略未定义的配置项，True：忽略默认配置中没有定义的用户输入项，已定义项则覆盖，
                                 False：使用用户定义项进行覆盖
        :type ignore_undefined: bool
        """

        def _update(data_src, data_dst, ignore_undefined):
            if ignore_undefined:
                for key, value in data_src.items():
                    if isinstance(value, dict):
                        _update(value, data_dst.get(key, {}), ignore_undefined)
                    elif key in data_dst:
                        data_src[key] = data_dst[key]
            else:
                for key, value in data_dst.items():
                    if isinstance(value, dict):
                        if not isinstance(data_src.get(key), dict):
                            data_src[key] = {}
                        _update(data_src[key], value, ignore_undefined)
                    else:
                        data_src[key] = value

        for opt_file in opt_files:
            with open(opt_file, 'r', encoding='utf-8') as f:
                _update(self._opts, json.load(f), ignore_undefined)
        if check_reserved:
            _validate(self._opts)

    def __getattr__(self, name):
        """
        魔法函数，实现.操作符访问

        :param name: 配置项
        :type name: string
        :returns: 如果是最底层配置项，则返回配置项的值，否则返回Config对象
        :rtype: any
        :raises: AttributeError
        """
        if name.startswith('__') or name in ('_opts', '_raise_not_exist'):
            raise AttributeError(name)
        try:
            value = self._opts[name]
        except KeyError:
            if self._raise_not_exist:
                raise AttributeError("No Such Option: %s" % name)
            return None
        if isinstance(value, Mapping):
            return Config(value, raise_not_exist=self._raise_not_exist)
        return value

    def __getitem__(self, key):
        """魔法函数，实现类字典访问"""
        value = self._opts[key]
        if isinstance(value, Mapping):
            return Config(value, raise_not_exist=self._raise_not_exist)
        return value

    def __contains__(self, key):
        return key in self._opts

    def __iter__(self):
        return iter(self._opts)

    def __len__(self):
        return len(self._opts)

    def keys(self):
        return list(self._opts)

    def items(self):
        return [(key, self._opts[key]) for key in self._opts]

    def values(self):
        return [self._opts[key] for key in self._opts]

    def get(self, key, default=None):
        return self._opts.get(key, default)

    def to_dict(self):
        return self._opts


def setup(path, default_opts=None, dir_path=None, ignore_undefined=False):
    """
    载入配置文件

    :param path: 配置文件路径
    :type path: str
    :param default_opts: 默认配置项，默认为CONFIG_OPTS
    :type default_opts: dict
    :param dir_path: 额外配置文件文件夹，其中的*.conf会按文件名顺序与配置文件信息进行合并
    :type dir_path: str
    """
    default_opts = default_opts or CONFIG_OPTS
    config_files = [path]
    if dir_path:
        config_files.extend(utils.walk_dir(dir_path, '*.conf'))

    ref = Config(copy.deepcopy(default_opts))
    ref.from_files(config_files, ignore_undefined=ignore_undefined)
    variables = ref.get('variables') or {}
    if variables:
        context = {}
        for k, v in variables.items():
            context[k] = call_intercepters(k, v)
        tpl = Template(json.dumps(ref.to_dict()), strict_undefined=True)
        ref = Config(json.loads(tpl.render(**context)))
    CONF(ref.to_dict(), check_reserved=True)


# 程序所需的最小配置项
CONFIG_OPTS = {
    'host': utils.get_hostname(),
    'language': 'en',
    'locale_app': 'crudgen',
    'locale_path': './etc/locale',
    'server': {
        'bind': '127.0.0.1',
        'port': 9001,
    },
    'variables': {
    },
    'log': {
        'log_console': True,
        'path': './server.log',
        'level': 'INFO',
        'format_string': '%(asctime)s.%(msecs)03d %(process)d %(levelname)s %(name)s:%(lineno)d [-] %(message)s',
        'date_format_string': '%Y-%m-%d %H:%M:%S',
    },
    'application': {
        'routers': []
    },
}

CONF = Config(None)
