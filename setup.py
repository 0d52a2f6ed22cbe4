#!/usr/bin/env python3
"""
PocketBASIC install script

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import os
import json
from io import open

from setuptools import find_packages, setup


###############################################################################
# get descriptions and version number

# file location
HERE = os.path.abspath(os.path.dirname(__file__))

# obtain metadata without importing the package (to avoid breaking sdist install)
with open(os.path.join(HERE, 'pocketbasic', 'basic', 'data', 'meta.json'), 'r') as meta:
    _METADATA = json.load(meta)
    VERSION = _METADATA['version']
    AUTHOR = _METADATA['author']
    DESCRIPTION = _METADATA['description']


###############################################################################
# setup parameters

SETUP_OPTIONS = dict(
    name='pocketbasic',
    version=VERSION,
    author=AUTHOR,
    description=DESCRIPTION,
    license='GPLv3+',
    python_requires='>=3.9',

    # contents
    # only include subpackages of pocketbasic: exclude tests etc
    packages=find_packages(include=['pocketbasic', 'pocketbasic.*']),
    package_data={
        'pocketbasic.basic.data': ['meta.json', 'USAGE.txt'],
        'pocketbasic.basic.data.programs': ['*.BAS'],
    },
    # launchers
    entry_points=dict(
        console_scripts=['pocketbasic=pocketbasic:main'],
    ),
)

###############################################################################
# run the setup

# perform the installation
setup(**SETUP_OPTIONS)
