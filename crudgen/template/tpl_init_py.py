# coding=utf-8

TEMPLATE = u'''${sys_default_coding}
'''
