#!/usr/bin/env python

"""Set up the pycivildate package.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

This package can be installed using pip as follows:

    pip install pycivildate

To install with the test requirements:

    pip install 'pycivildate[test]'
"""

import os
import re

from setuptools import setup

with open(os.path.join(os.path.dirname(__file__), 'pycivildate', '__init__.py')) as v:
    m = re.search(r"^ *__version__ *= *'(.*?)'", v.read(), re.M)
    if m is None:
        raise RuntimeError("Cannot detect version in pycivildate/__init__.py")
    VERSION = m.group(1)

readme = os.path.join(os.path.dirname(__file__), 'README.rst')

setup(
    name='pycivildate',
    version=VERSION,
    author='NuoDB',
    author_email='drivers@nuodb.com',
    description='Timezone independent calendar days with compact sortable codes',
    keywords='date calendar day radix36 timezone',
    packages=['pycivildate'],
    license='BSD License',
    long_description=open(readme).read(),
    python_requires='>=3.9',
    install_requires=['jdcal>=1.4', 'tzlocal>=3.0', 'pytz>=2015.4', 'tzdata'],
    extras_require=dict(test='pytest>=6.0'),
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Topic :: Software Development :: Libraries',
    ],
)
