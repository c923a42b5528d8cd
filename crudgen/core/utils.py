# coding=utf-8
"""
本模块提供各类常用单一功能集合

"""

import datetime
import fnmatch
import json
import os
import socket


class ComplexEncoder(json.JSONEncoder):
    """加强版的JSON Encoder，支持日期、日期+时间类型的转换"""
    def default(self, obj):
        # fix, 不要使用strftime，当超过1900年时会报错
        if isinstance(obj, datetime.datetime):
            return obj.isoformat(' ').split('.')[0]
        if isinstance(obj, datetime.date):
            return obj.isoformat()
        return json.JSONEncoder.default(self, obj)


def get_hostname():
    """
    获取主机名

    :returns: 主机名
    :rtype: string
    """
    return socket.gethostname()


def walk_dir(dir_path, pattern):
    """
    递归遍历文件夹，列出所有符合pattern模式的文件，按文件名排序

    :param dir_path: 文件夹路径
    :type dir_path: str
    :param pattern: 过滤模式
    :type pattern: str
    :returns: 文件列表
    :rtype: list
    """
    result = []
    for root, dirs, files in os.walk(dir_path):
        for name in files:
            filename = os.path.join(root, name)
            if fnmatch.fnmatch(filename, pattern):
                result.append(filename)
    return sorted(result)


def is_string_type(value):
    """
    判断value是否字符类型

    :param value: 输入值
    :type value: any
    :returns: 判断结果
    :rtype: bool
    """
    return isinstance(value, (str, bytes))


def is_list_type(value):
    """
    判断value是否列表类型

    :param value: 输入值
    :type value: any
    :returns: 判断结果
    :rtype: bool
    """
    return isinstance(value, (list, set, tuple))

