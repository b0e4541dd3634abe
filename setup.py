#!/usr/bin/env python3
"""
Setup script for yearwall - full-year calendar wallpaper server
"""

from setuptools import setup, find_packages
import os

# Read the README file
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return 'Full-year calendar wallpapers rendered on demand for phone screens'

# Read requirements
def read_requirements(filename):
    req_path = os.path.join(os.path.dirname(__file__), filename)
    requirements = []
    if os.path.exists(req_path):
        with open(req_path, 'r') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#') and not line.startswith('-r'):
                    requirements.append(line)
    return requirements

setup(
    name='yearwall',
    version='0.1.0',
    description='Full-year calendar wallpapers rendered on demand for phone screens',
    long_description=read_readme(),
    long_description_content_type='text/markdown',
    author='Year Wallpaper Developer',
    author_email='developer@example.com',

    # Package discovery
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=[
        'http_server',
        'wallpaper_example',
        'check_install',
    ],

    include_package_data=True,

    # Dependencies
    install_requires=read_requirements('requirements.txt'),
    extras_require={
        'dev': read_requirements('requirements-dev.txt'),
    },

    # Python version requirement
    python_requires='>=3.8',

    # Entry points for command-line scripts
    entry_points={
        'console_scripts': [
            'yearwall-server=http_server:main',
            'yearwall-render=wallpaper_example:main',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Internet :: WWW/HTTP :: HTTP Servers',
    ],

    keywords='calendar wallpaper year-progress png pillow iphone',

    license='MIT',

    zip_safe=False,
)
