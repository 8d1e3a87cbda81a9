#!/usr/bin/env python

import os

from setuptools import setup, find_packages

from scriptcodec import __version__

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'README.md')) as f:
    README = f.read()

requires = []

setup(
    name='python-scriptcodec',
    version=__version__,
    description='Binary codec and template classifier for Bitcoin scripts.',
    long_description=README,
    long_description_content_type='text/markdown',
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)",
    ],
    python_requires='>=3.7',
    keywords='bitcoin script',
    packages=find_packages(exclude=['examples']),
    zip_safe=False,
    install_requires=requires,
    test_suite="scriptcodec.tests"
)
