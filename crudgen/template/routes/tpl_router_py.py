# coding=utf-8

TEMPLATE = u'''${sys_default_coding}
"""
${controller_name}路由，将CRUD请求原样转发至controllers.${controller_name}

"""

from crudgen.common.router import Router

from ..controllers import ${controller_name}

router = Router()


# GET
@router.get('/')
def on_list(req, resp):
    ${controller_name}.list(req, resp)


# GET
@router.get('/:id')
def on_show(req, resp, id):
    ${controller_name}.show(req, resp, id)


# POST
@router.post('/')
def on_create(req, resp):
    ${controller_name}.create(req, resp)


# PUT
@router.put('/:id')
def on_update(req, resp, id):
    ${controller_name}.update(req, resp, id)


# DELETE
@router.delete('/:id')
def on_remove(req, resp, id):
    ${controller_name}.remove(req, resp, id)


def add_routes(api, prefix='/${controller_name}'):
    return router.mount(api, prefix)
'''
