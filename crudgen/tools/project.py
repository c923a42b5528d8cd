# coding=utf-8
"""
本模块提供项目、CRUD路由脚手架生成功能

"""

import importlib
import keyword
import logging
import os
import os.path
import re
import sys

from mako.template import Template

from crudgen.core import exceptions
from crudgen.core.i18n import _

LOG = logging.getLogger(__name__)

PYTHON_CODING = '# coding=utf-8'
DEFAULT_VAR_RULE = r'^[a-zA-Z][_a-zA-Z0-9]*$'
# 路由模块中已定义的名称，资源名不能与之冲突
ROUTER_RESERVED = ('router', 'add_routes', 'Router', 'on_list', 'on_show', 'on_create', 'on_update', 'on_remove',
                   'req', 'resp', 'id')


def mkdir(dir_path):
    os.makedirs(dir_path, exist_ok=True)


def input_var_with_check(prompt, rule=None, max_try=3):
    rule = rule or DEFAULT_VAR_RULE
    content = input(prompt)
    counter = 1
    while not re.match(rule, content):
        if counter >= max_try:
            sys.exit(1)
        content = input(prompt)
        counter += 1
    return content


def check_name(name, attribute='name'):
    """
    检查资源/项目名称是否可作为python模块名及变量名使用

    :param name: 名称
    :type name: str
    :raises: ValidationError
    """
    if not name or not re.match(DEFAULT_VAR_RULE, name):
        raise exceptions.ValidationError(attribute=attribute, msg=_('must match %s') % DEFAULT_VAR_RULE)
    if keyword.iskeyword(name):
        raise exceptions.ValidationError(attribute=attribute, msg=_('%s is a python keyword') % name)
    if name in ROUTER_RESERVED:
        raise exceptions.ValidationError(attribute=attribute, msg=_('%s is reserved by router module') % name)
    return name


def get_template(name):
    mod_name = 'crudgen.template.' + name
    try:
        mod = importlib.import_module(mod_name)
    except ImportError:
        raise exceptions.NotFoundError(resource=_('template: %s') % name)
    return mod.TEMPLATE


def render_string(source_code, **kwargs):
    kwargs['sys_default_coding'] = PYTHON_CODING
    return Template(source_code).render(**kwargs)


def render(source_code, output_file, **kwargs):
    content = render_string(source_code, **kwargs)
    with open(output_file, 'w', encoding='utf-8') as f_target:
        f_target.write(content)
    LOG.debug('render file: %s', output_file)
    return output_file


def render_router(controller_name):
    """
    渲染CRUD路由模块源码

    :param controller_name: 资源(控制器)名称
    :type controller_name: str
    :returns: 路由模块源码
    :rtype: str
    """
    check_name(controller_name, attribute='controller_name')
    return render_string(get_template('routes.tpl_router_py'), controller_name=controller_name)


def render_controller(controller_name):
    """渲染控制器模块源码"""
    check_name(controller_name, attribute='controller_name')
    return render_string(get_template('controllers.tpl_controller_py'), controller_name=controller_name)


def _ensure_package(dir_path):
    mkdir(dir_path)
    init_file = os.path.join(dir_path, '__init__.py')
    if not os.path.exists(init_file):
        render(get_template('tpl_init_py'), init_file)


def initialize_package(dest_path, pkg_name):
    src_dir = os.path.join(dest_path, pkg_name)
    _ensure_package(src_dir)
    _ensure_package(os.path.join(src_dir, 'routes'))
    _ensure_package(os.path.join(src_dir, 'controllers'))
    render(get_template('tpl_requirements_txt'),
           os.path.join(dest_path, 'requirements.txt'))


def initialize_server(dest_path, pkg_name, config_file, config_dir):
    config_file_fixed = config_file.replace('\\', '/')
    config_dir_fixed = config_dir.replace('\\', '/')
    server_dir = os.path.join(dest_path, pkg_name, 'server')
    _ensure_package(server_dir)
    render(get_template('server.tpl_simple_server_py'),
           os.path.join(server_dir, 'simple_server.py'),
           pkg_name=pkg_name)
    render(get_template('server.tpl_wsgi_server_py'),
           os.path.join(server_dir, 'wsgi_server.py'),
           pkg_name=pkg_name, config_file=config_file_fixed, config_dir=config_dir_fixed)


def initialize_etc(dest_path, pkg_name):
    etc_dir = os.path.join(dest_path, 'etc')
    mkdir(etc_dir)
    render(get_template('etc.tpl_project_conf'),
           os.path.join(etc_dir, pkg_name + '.conf'),
           pkg_name=pkg_name)


def initialize_resource(src_dir, controller_name, force=False):
    """
    在包目录中生成routes/<name>.py以及controllers/<name>.py

    已存在的控制器不会被覆盖(除非force)，已存在的路由在非force时抛出ConflictError
    """
    routes_dir = os.path.join(src_dir, 'routes')
    controllers_dir = os.path.join(src_dir, 'controllers')
    _ensure_package(src_dir)
    _ensure_package(routes_dir)
    _ensure_package(controllers_dir)
    router_file = os.path.join(routes_dir, controller_name + '.py')
    controller_file = os.path.join(controllers_dir, controller_name + '.py')
    if os.path.exists(router_file) and not force:
        raise exceptions.ConflictError(msg=_('router %s already exists') % router_file)
    written = []
    if force or not os.path.exists(controller_file):
        with open(controller_file, 'w', encoding='utf-8') as f:
            f.write(render_controller(controller_name))
        written.append(controller_file)
    else:
        LOG.info('controller %s exists, skip', controller_file)
    with open(router_file, 'w', encoding='utf-8') as f:
        f.write(render_router(controller_name))
    written.append(router_file)
    return written


def create_project(dest_path, name, version, author, author_email, config_dir):
    check_name(name)
    dest_path = os.path.join(dest_path, name)
    mkdir(dest_path)
    print(u"### 创建项目目录：%s" % dest_path)
    LOG.info('create project %s(%s), author: %s <%s>', name, version, author, author_email)
    config_file = os.path.join(config_dir, name + '.conf')
    config_dir = config_file + '.d'
    # 初始化python标准包文件
    initialize_package(dest_path, name)
    print(u"### 创建项目：%s(%s)通用文件 " % (name, version))
    # 初始化server目录
    initialize_server(dest_path, name, config_file, config_dir)
    print(u"### 创建启动服务脚本")
    # 初始化etc目录
    initialize_etc(dest_path, name)
    print(u"### 创建启动配置：%s" % config_file)
    print(u"### 完成")
    return dest_path


def create_resource(dest_path, pkg_name, name, force=False):
    check_name(pkg_name, attribute='pkg_name')
    check_name(name)
    src_dir = os.path.join(dest_path, pkg_name, pkg_name)
    print(u"### 创建资源目录：%s" % src_dir)
    written = initialize_resource(src_dir, name, force=force)
    for filename in written:
        print(u"### 创建脚本：%s" % filename)
    print(u"### 请在%s.conf的application.routers中添加：%s.routes.%s" % (pkg_name, pkg_name, name))
    print(u"### 完成")
    return written


def generate():
    dest_path = input_var_with_check(u'请输入项目生成目录：', rule='.*')
    pkg_name = input_var_with_check(u'请输入项目名称(英)：')
    while True:
        gen_type = input(u'请输入生成类型[project,resource,其他内容退出]：')
        try:
            if gen_type.lower() == 'project':
                version = input_var_with_check(u'请输入项目版本：', rule='.*')
                author = input_var_with_check(u'请输入项目作者：', rule='.*')
                author_email = input_var_with_check(u'请输入项目作者Email：', rule='.*')
                config_path = input_var_with_check(u'请输入项目启动配置目录：', rule='.*')
                create_project(dest_path, pkg_name, version, author, author_email, config_path)
            elif gen_type.lower() == 'resource':
                name = input_var_with_check(u'请输入资源名称(英)：')
                create_resource(dest_path, pkg_name, name)
            else:
                sys.exit(0)
        except exceptions.Error as e:
            print(u"### 失败：%s" % e)
