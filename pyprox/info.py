# coding: utf-8
""" pyProx version, required package versions, and utilities for checking.
"""
# Author: pyProx developers
# License: new BSD

__version__ = '0.1.0'

# This is a tuple to preserve order, so that dependencies are checked
#   in some meaningful order (more => less 'core').
REQUIRED_MODULE_METADATA = (
    ('packaging', {
        'min_version': '20.0',
        'required_at_installation': True,
        'install_info': 'https://packaging.pypa.io/'}),
    ('numpy', {
        'min_version': '1.22.0',
        'required_at_installation': True,
        'install_info': 'https://numpy.org/install/'}),
    ('scipy', {
        'min_version': '1.12.0',
        'required_at_installation': True,
        'install_info': 'https://scipy.org/install/'}),
)


def _import_module_with_version_check(module_name, minimum_version,
                                      install_info=None):
    """ Check that module is installed with a recent enough version.
    """
    from packaging.version import Version

    try:
        module = __import__(module_name)
    except ImportError as exc:
        user_friendly_info = ('Module "{0}" could not be found. {1}').format(
            module_name,
            install_info or 'Please install it properly to use pyprox.')
        exc.args += (user_friendly_info,)
        raise

    module_version = getattr(module, '__version__', '0.0.0')
    if Version(module_version) < Version(minimum_version):
        message = ('A {module_name} version of at least {minimum_version} '
                   'is required to use pyprox. {module_version} was found. '
                   'Please upgrade {module_name}').format(
                       module_name=module_name,
                       minimum_version=minimum_version,
                       module_version=module_version)
        raise ImportError(message)

    return module


def _check_module_dependencies(is_pyprox_installing=False):
    """ Throw an exception if pyprox dependencies are not installed.

    Parameters
    ----------
    is_pyprox_installing: boolean
        if True, only error on missing packages that cannot be auto-installed.
        if False, error on any missing package.

    Throws
    -------
    ImportError
    """
    for (module_name, module_metadata) in REQUIRED_MODULE_METADATA:
        if not (is_pyprox_installing and
                not module_metadata['required_at_installation']):
            # Skip check only when installing and it's a module that
            # will be auto-installed.
            _import_module_with_version_check(
                module_name=module_name,
                minimum_version=module_metadata['min_version'],
                install_info=module_metadata.get('install_info'))
