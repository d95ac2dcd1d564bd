#!/usr/bin/env python

from setuptools import find_packages
from setuptools import setup

install_requires = [
    'numpy',
    'scipy',
    'pydantic>=2',
    'ujson'
]

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(name='hash_quality',
      version='1.0.0',
      description='Chi-square distribution quality tests for string hash functions',
      long_description=long_description,
      long_description_content_type="text/markdown",
      install_requires=install_requires,
      extras_require={
          'tests': ['pytest>=2.8'],
      },
      package_dir={'': './'},
      packages=find_packages('./'),
      entry_points={
          'console_scripts': [
              'hash-quality=hash_quality.main:main',
              'hash-quality-no-histogram=hash_quality.main:main_no_histogram',
          ],
      },
      classifiers=[
          "Programming Language :: Python :: 3",
          "License :: OSI Approved :: Apache Software License",
          "Operating System :: OS Independent",
      ],
      python_requires='>=3.10',
      )
