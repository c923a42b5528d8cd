# coding=utf-8
import importlib
import tempfile

from crudgen.tools import project


def make_project(monkeypatch, pkg_name, *resources):
    """在临时目录生成项目及资源，并加入sys.path，返回项目根目录"""
    temppath = tempfile.mkdtemp()
    root = project.create_project(temppath, pkg_name, '1.0', 'test', 'test@test.com', './etc')
    for name in resources:
        project.create_resource(temppath, pkg_name, name)
    monkeypatch.syspath_prepend(root)
    importlib.invalidate_caches()
    return root
