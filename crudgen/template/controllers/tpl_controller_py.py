# coding=utf-8

TEMPLATE = u'''${sys_default_coding}
"""
${controller_name}控制器，由routes.${controller_name}调用

"""

import logging

import falcon

from crudgen.core import exceptions

LOG = logging.getLogger(__name__)


def list(req, resp):
    resp.media = {'count': 0, 'data': []}


def show(req, resp, id):
    raise exceptions.NotFoundError(resource='${controller_name}(%s)' % id)


def create(req, resp):
    resp.status = falcon.HTTP_201
    resp.media = req.get_media(default_when_empty={})


def update(req, resp, id):
    raise exceptions.NotFoundError(resource='${controller_name}(%s)' % id)


def remove(req, resp, id):
    raise exceptions.NotFoundError(resource='${controller_name}(%s)' % id)
'''
