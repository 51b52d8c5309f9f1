#!/usr/bin/env python3

from setuptools import setup, find_packages

requires = [
    "typer (>=0.9)",
    "rich (>=13.0)",
]

extras = {
    "test": ["pytest (>=7.0)"],
}

setup(name='mathparser',
      version='1.0.0',
      description='Arithmetic expression parser using the shunting-yard algorithm',
      author='BHodges',
      python_requires='>=3.7',
      install_requires=requires,
      extras_require=extras,
      scripts=['math-parser.py'],
      packages=find_packages(exclude=['tests']))
