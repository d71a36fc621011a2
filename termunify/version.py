from os.path import join as pjoin

# Format expected by setup.py: string of form "X.Y.Z"
_version_major = 0
_version_minor = 1
_version_micro = ''  # use '' for first of series, number for 1 and above
_version_extra = 'dev'
# _version_extra = ''  # Uncomment this for full releases

# Construct full version string from these.
_ver = [_version_major, _version_minor]
if _version_micro:
    _ver.append(_version_micro)
if _version_extra:
    _ver.append(_version_extra)

__version__ = '.'.join(map(str, _ver))

CLASSIFIERS = ["Development Status :: 3 - Alpha",
               "Environment :: Console",
               "Intended Audience :: Science/Research",
               "License :: OSI Approved :: MIT License",
               "Operating System :: OS Independent",
               "Programming Language :: Python",
               "Topic :: Scientific/Engineering"]

# Description should be a one-liner:
description = "termunify: first-order syntactic unification of terms"
# Long description will go up on the pypi page
long_description = """

termunify
=========
termunify computes the most general unifier of two first-order terms,
with occurs-check, and generates the classical pair of terms whose
unifier grows exponentially, to benchmark it.

License
=======
``termunify`` is licensed under the terms of the MIT license.
"""

NAME = "termunify"
DESCRIPTION = description
LONG_DESCRIPTION = long_description
LICENSE = "MIT"
PLATFORMS = "OS Independent"
MAJOR = _version_major
MINOR = _version_minor
MICRO = _version_micro
VERSION = __version__
PACKAGE_DATA = {
    'termunify': [pjoin('config', '*.ini')],
}
