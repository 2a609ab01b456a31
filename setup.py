import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='bikeshare',
    version='1.0.0',
    license='MIT',
    description='The service layer and api of a bike sharing system.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.9',
    install_requires=[
        'aiohttp>=3.9',
        'uvloop',
        'attrs',
        'marshmallow>=3.13,<4',
        'tortoise-orm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-aiohttp',
            'pytest-asyncio',
            'Faker',
        ],
    },
    entry_points={
        'console_scripts': ['bikeshare=bikeshare.cli:run'],
    },
)
