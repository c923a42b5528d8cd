# coding=utf-8

TEMPLATE = u'''crudgen
falcon>=3.0
'''
