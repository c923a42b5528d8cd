# coding=utf-8

# Always prefer setuptools over distutils
from codecs import open
from os import path

from setuptools import setup, find_packages

# To use a consistent encoding
here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()
with open(path.join(here, 'VERSION'), encoding='utf-8') as f:
    version = f.read().strip()
with open(path.join(here, 'requirements.txt'), encoding='utf-8') as f:
    requirements = [line.strip()
                    for line in f if line.strip() and not line.strip().startswith('--') and not line.strip().startswith('#')]

setup(
    name='crudgen',

    # Versions should comply with PEP440.  For a discussion on single-sourcing
    # the version across setup.py and the project code, see
    # https://packaging.python.org/en/latest/single_source_version.html
    version=version,

    description='CRUD router scaffolding for Falcon applications, rendered from Mako stencils',
    long_description=long_description,
    long_description_content_type="text/markdown",

    license='Apache License 2.0',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Topic :: Software Development :: Code Generators',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent'
    ],

    keywords='crud restful rest api falcon scaffold generator mako',

    packages=find_packages(exclude=['docs', 'tests', 'tests.*']),

    python_requires='>=3.8',

    # List run-time dependencies here.  These will be installed by pip when
    # your project is installed.
    install_requires=requirements,

    # $ pip install -e .[testing]
    extras_require={'testing': ['pytest', 'pytest-cov', 'pytest-mock']},

    zip_safe=False,

    entry_points={
        'console_scripts': [
           'crudgen_generator=crudgen.tools.project:generate',
        ],
    },
)
