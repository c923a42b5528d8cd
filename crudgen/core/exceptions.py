# coding=utf-8
"""
本模块提供异常信息封装

"""

import json

from crudgen.core import utils
from crudgen.core.i18n import _


class Error(Exception):
    """异常基类"""
    code = 500

    def __init__(self, message=None, exception_data=None, **kwargs):
        if message is not None:
            self.message = message
        else:
            self._build_message(**kwargs)
        self._exception_data = dict(exception_data or {})
        # code,title,description为保留字段
        self._exception_data.pop('code', None)
        self._exception_data.pop('title', None)
        self._exception_data.pop('description', None)
        super(Error, self).__init__(self.message, self._exception_data)

    def _build_message(self, **kwargs):
        self.message = self.message_format % kwargs

    def __str__(self):
        return self.message

    @property
    def message_format(self):
        return _('Unknown Error')

    @property
    def title(self):
        return None

    @property
    def exception_data(self):
        return self._exception_data

    def to_dict(self):
        data = {'code': self.code, 'title': self.title, 'description': self.message}
        if self._exception_data:
            data.update(self._exception_data)
        return data

    def to_json(self):
        return json.dumps(self.to_dict(), cls=utils.ComplexEncoder)


class CriticalError(Error):
    """重大错误异常"""
    code = 500

    @property
    def title(self):
        return _('Server Error')

    @property
    def message_format(self):
        return _('detail: %(msg)s')


class ValidationError(Error):
    """验证错误异常"""
    code = 400

    @property
    def title(self):
        return _('Validation Error')

    @property
    def message_format(self):
        return _('detail: %(attribute)s validate failed, because: %(msg)s')


class NotFoundError(Error):
    """资源不存在异常"""
    code = 404

    @property
    def title(self):
        return _('Not Found')

    @property
    def message_format(self):
        return _('detail: the resource(%(resource)s) you request not found')


class MethodForbiddenError(Error):
    """HTTP方法不允许访问"""
    code = 405

    @property
    def title(self):
        return _('Method Not Allowed')

    @property
    def message_format(self):
        return _('detail: method you request is not allow to perfrom')


class ConflictError(Error):
    """约束冲突错误异常"""
    code = 409

    @property
    def title(self):
        return _('Conflict')

    @property
    def message_format(self):
        return _('detail: %(msg)s')
