#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.md') as readme_file:
    readme = readme_file.read()

requirements = ['numpy', ]

test_requirements = ['pytest', 'sympy', ]

setup(
    author="Tyler Jarvis",
    author_email='jarvis@math.byu.edu',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    description="Reduced Groebner bases of real polynomial systems with Buchberger's algorithm.",
    install_requires=requirements,
    extras_require={'test': test_requirements},
    license="MIT license",
    long_description=readme + '\n\n',
    long_description_content_type='text/markdown',
    include_package_data=True,
    keywords='Groebner Buchberger',
    name='buchberger',
    packages=find_packages(include=['buchberger']),
    python_requires='>=3.8',
    url='https://github.com/tylerjarvis/RootFinding',
    version='0.1.0',
    zip_safe=False,
)
