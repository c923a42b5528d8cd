# coding=utf-8

TEMPLATE = u'''${sys_default_coding}
"""
${pkg_name}.server.simple_server
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

本模块提供开发调试用的简易启动能力

"""

import logging
from wsgiref.simple_server import make_server

from crudgen.core import config
from ${pkg_name}.server.wsgi_server import application

LOG = logging.getLogger(__name__)
CONF = config.CONF


def main():
    bind_addr = CONF.server.bind
    port = CONF.server.port
    LOG.info("Serving on %s:%d...", bind_addr, port)
    httpd = make_server(bind_addr, port, application)
    httpd.serve_forever()


if __name__ == '__main__':
    main()
'''
