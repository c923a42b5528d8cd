# coding=utf-8

TEMPLATE = u'''{
    "locale_app": "${pkg_name}",
    "locale_path": "./etc/locale",
    "language": "en",
    "server": {
        "bind": "0.0.0.0",
        "port": 9000
    },
    "log": {
        "path": "./server.log",
        "level": "INFO",
        "format_string": "%(asctime)s.%(msecs)03d %(process)d %(levelname)s %(name)s:%(lineno)d [-] %(message)s",
        "date_format_string": "%Y-%m-%d %H:%M:%S"
    },
    "application": {
        "routers": []
    }
}
'''
