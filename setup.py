#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

readme = """Varnam tools are a set of small scripts useful when developing
the varnam transliteration library and its schemes"""

setup(name='varnamtools',
      version='0.0.1',
      description='Varnam developer tools',
      license="Apache",
      long_description=readme,
      packages=find_packages(exclude=['tests']),
      python_requires='>=3.6',
      install_requires=[
          # the unicode extra brings in unicodedata2 for current UCD data
          'fontTools[unicode]',
      ],
      entry_points={
          'console_scripts': [
              'unidump = varnamtools.unidump:main',
          ]
      })
