"""Setup script for katha."""
import re

from setuptools import setup, find_packages  # type: ignore

with open('katha/__init__.py') as f:
    version = re.search(r"^version = '([^']+)'", f.read(), re.M).group(1)

setup(
    name='katha',
    version=version,
    description='Functional programming helpers: currying that understands awaitables, composition and mapping utilities',  # noqa
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Framework :: AsyncIO',
    ],
    keywords='functional curry compose pipe',
    packages=find_packages(),  # type: ignore
    python_requires='>=3.8',
    install_requires=[
        'typing-extensions>=4.1',
    ],
    tests_require=[
        'hypothesis>=6',
    ],
    extras_require={
        'test': ['coverage>=6.4.4', 'hypothesis>=6'],
        'dev': ['axblack==20220330', 'mypy>=1.1.1', 'pre-commit>=2.6.0,<3'],
    },
)
