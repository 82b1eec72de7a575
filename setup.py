#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup

readme = open('README.rst', encoding='utf-8').read()
version = (0, 1, 0)


setup(
    name='tonalkit',
    python_requires=">=3.10",
    version=".".join(map(str, version)),
    description='Pitch, pitch classes and note names in 12-tone equal temperament',
    long_description=readme,
    packages=[
        'tonalkit',
    ],
    install_requires=[
        "numpy",
        "configdict>=2.10.0",
    ],
    extras_require={
        'test': ['pytest'],
    },
    license="LGPLv2",
    zip_safe=False,
    classifiers=[
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Multimedia :: Sound/Audio'
    ],
)
