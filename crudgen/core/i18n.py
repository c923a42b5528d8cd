# coding=utf-8
"""
本模块提供i18n国际化功能

"""

import collections
import gettext
import logging

from crudgen.core import utils

LOG = logging.getLogger(__name__)


class Translator(object):
    """
    i18n国际化翻译器

    用户可以调用setup来更改当前locale
    """

    def __init__(self):
        self.default_language = None
        self._translation_maps = collections.OrderedDict()

    def __call__(self, value):
        if self._translation_maps and self.default_language:
            return self._translation_maps[self.default_language].gettext(value)
        return value

    def setup(self, app, locales, lang):
        # 清除成员信息以支持多次初始化
        self.default_language = None
        self._translation_maps = collections.OrderedDict()
        languages = lang if utils.is_list_type(lang) else [lang]
        if len(languages) == 0:
            LOG.warning('language(%s) files not found, no translation will be used', lang)
        for l in languages:
            find_mo = gettext.find(app, localedir=locales, languages=[l])
            if find_mo:
                # 加载所有指定语言 & 设置第一个有效mo文件的语言为默认语言
                with open(find_mo, 'rb') as f:
                    self._translation_maps[l] = gettext.GNUTranslations(f)
                if self.default_language is None:
                    self.default_language = l
            else:
                LOG.warning('language(%s) files not found, no translation will be used', l)

    def change(self, lang):
        # 更改默认翻译语言
        if lang in self.available_languages:
            self.default_language = lang
            return True
        return False

    @property
    def available_languages(self):
        return list(self._translation_maps.keys())


_ = Translator()
