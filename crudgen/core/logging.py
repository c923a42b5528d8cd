# coding=utf-8
"""
本模块提供日志初始化功能

"""

import importlib
import logging
from logging.handlers import WatchedFileHandler

from crudgen.core import config

CONF = config.CONF
LEVEL_MAP = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}


def _handler_finder(name):
    modpath, handler = name.strip().split(':')
    mod = importlib.import_module(modpath)
    return getattr(mod, handler, None)


def _make_handler(obj):
    handler_path = obj.get('handler', None)
    if handler_path:
        handler_cls = _handler_finder(handler_path)
        handler_args = obj.get('handler_args', [])
        if handler_cls is None:
            raise ValueError('logging Handler not found: %s' % handler_path)
        try:
            return handler_cls(*handler_args)
        except Exception as e:
            raise RuntimeError('logging Handler: %s initlize error: %s' % (handler_cls.__name__, e))
    return WatchedFileHandler(obj['path'])


def _make_formatter(obj):
    # eg. %(asctime)s.%(msecs)03d %(process)d %(levelname)s %(name)s:%(lineno)d [-] %(message)s
    # eg. %Y-%m-%d %H:%M:%S
    return logging.Formatter(fmt=obj.get('format_string', CONF.log.format_string),
                             datefmt=obj.get('date_format_string', CONF.log.date_format_string))


def setup():
    """日志输出初始化"""
    root = logging.getLogger()
    root.setLevel(LEVEL_MAP.get(CONF.log.level.upper(), logging.INFO))
    # 多进程下使用WatchedFileHandler，日志轮转统一使用logrotate
    handler = _make_handler(CONF.log)
    handler.setFormatter(_make_formatter(CONF.log))
    root.addHandler(handler)
    if CONF.log.log_console:
        handler = logging.StreamHandler()
        handler.setFormatter(_make_formatter(CONF.log))
        root.addHandler(handler)
    logging.captureWarnings(True)
    for log_config in CONF.log.get('loggers', []):
        logger = logging.getLogger(log_config['name'])
        logger.propagate = log_config.get('propagate', True)
        logger.setLevel(LEVEL_MAP.get(log_config.get('level', CONF.log.level).upper(), logging.INFO))
        formatter = _make_formatter(log_config)
        handler = _make_handler(log_config)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        sub_log_console = log_config.get('log_console', CONF.log.log_console)
        # 防止控制台重复日志
        if CONF.log.log_console and logger.propagate:
            sub_log_console = False
        if sub_log_console:
            handler = logging.StreamHandler()
            handler.setFormatter(formatter)
            logger.addHandler(handler)
