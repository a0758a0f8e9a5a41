from setuptools import setup, find_packages
import re

# Read version from primacalc/__init__.py
with open('primacalc/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='prima-calc',
    version=version,
    packages=find_packages(include=['primacalc', 'primacalc.*']),
    package_data={
        'primacalc': ['tax_rules/*.yaml'],
    },
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'prima-calc=primacalc.cli.__main__:main',
        ],
    },
    author='Personal',
    description='Colombian semi-annual service bonus (prima) calculator.',
    python_requires='>=3.10',
)
