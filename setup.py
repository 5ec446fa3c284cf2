#!/usr/bin/env python
# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

SEQCHANGES_PATH = HERE / "seqchanges"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(SEQCHANGES_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='seqchanges',
      version=VERSION,
      description='Minimal edit scripts with moves between ordered sequences',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      python_requires='>=3.7',
      packages=find_packages(include=['seqchanges', 'seqchanges.*']),
      package_data={'seqchanges': ['*.schema.json']},
      install_requires=[
          'colorama',
          'tabulate',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonschema',
              'pytest>=6.0',
              'pytest-timeout',
          ],
      },
      entry_points={
          'console_scripts': [
              'seqchanges = seqchanges.__main__:main_dispatch',
              'seqchanges-diff = seqchanges.seqdiffapp:main',
              'seqchanges-show = seqchanges.seqshowapp:main',
          ],
      },
      classifiers=[
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
      ],
    )
