# setup.py
from setuptools import setup, find_packages

setup(
    name='dropbattle',
    version='0.1',
    packages=find_packages(include=['dropbattle', 'dropbattle.*']),
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest'],
    },
)
