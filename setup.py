#! /usr/bin/env python
""" Catalog of proximable functions for first-order convex optimization.
"""
import sys
import os
from setuptools import setup, find_packages
# Author: pyProx developers
# License: new BSD


def load_version():
    """Executes pyprox/info.py in a globals dictionary and return it.

    Note: importing pyProx is not an option because there may be
    dependencies like scipy which are not installed and
    setup.py is supposed to install them.
    """
    # load all vars into globals, otherwise
    #   the later function call using global vars doesn't work.
    globals_dict = {}
    with open(os.path.join('pyprox', 'info.py')) as fp:
        exec(fp.read(), globals_dict)
    return globals_dict


def is_installing():
    # Allow command-lines such as "python setup.py build install"
    install_commands = set(['install', 'develop'])
    return install_commands.intersection(set(sys.argv))


# Make sources available using relative paths from this file's directory.
os.chdir(os.path.dirname(os.path.abspath(__file__)))

_VERSION_GLOBALS = load_version()
DISTNAME = 'pyprox'
DESCRIPTION = __doc__
with open('README.rst') as fp:
    LONG_DESCRIPTION = fp.read()
MAINTAINER = 'pyProx developers'
LICENSE = 'new BSD'
VERSION = _VERSION_GLOBALS['__version__']


if __name__ == "__main__":
    if is_installing():
        module_check_fn = _VERSION_GLOBALS['_check_module_dependencies']
        module_check_fn(is_pyprox_installing=True)

    install_requires = \
            ['{0}>={1}'.format(mod, meta['min_version'])
             for mod, meta in _VERSION_GLOBALS['REQUIRED_MODULE_METADATA']
             if meta['required_at_installation']]

    setup(name=DISTNAME,
          maintainer=MAINTAINER,
          description=DESCRIPTION,
          license=LICENSE,
          version=VERSION,
          long_description=LONG_DESCRIPTION,
          zip_safe=False,  # the package can run out of an .egg file
          classifiers=[
              'Intended Audience :: Science/Research',
              'Intended Audience :: Developers',
              'License :: OSI Approved',
              'Programming Language :: Python',
              'Topic :: Software Development',
              'Topic :: Scientific/Engineering',
              'Operating System :: POSIX',
              'Operating System :: Unix',
              'Programming Language :: Python :: 3',
          ],
          packages=find_packages(),
          python_requires='>=3.9',
          install_requires=install_requires,
          extras_require={'test': ['pytest']},
          )
