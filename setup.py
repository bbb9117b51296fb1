#!/usr/bin/env python
from setuptools import setup
setup(
    name='graphobjects',
    version='1.0',
    description='real Python objects for the Facebook Graph API',
    author='Six Apart Ltd.',
    author_email='python@sixapart.com',

    packages=['graphobjects'],
    provides=['graphobjects'],
    python_requires='>=3.7',
    install_requires=['simplejson>=3.3.0', 'httplib2>=0.10'],
    extras_require={
        'test': ['mock', 'pytest'],
    },
)
