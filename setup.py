"""
Setup.py script for corogen
"""
from setuptools import setup, find_packages
# To use a consistent encoding
from codecs import open
import os

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

PKG_EXCLUDES = ('demo', 'demo.*', '*.test', '*.test.*')

setup(
    name='corogen',
    version='0.3.0',
    description='Resumable generators built on greenlets',
    long_description=long_description,

    license='MIT',

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='generator coroutine greenlet',

    packages=find_packages(exclude=PKG_EXCLUDES),
    python_requires='>=3.8',

    install_requires=['greenlet>=2.0', 'py>=1.11'],
    extras_require={
        'test': ['pytest>=7'],
    },
)
