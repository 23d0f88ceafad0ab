#!/usr/bin/env python3

from setuptools import setup

setup(
    name="pocketdump",
    version="0.1.0",
    description="Convert Pocket JSON dumps into bookmark listings.",
    author="Sean O'Connell",
    author_email="sean@sdoconnell.net",
    url="https://github.com/sdoconnell/pocketdump",
    license="MIT",
    python_requires='>=3.8',
    packages=['pocketdump'],
    install_requires=[
        'Rich>=10.2',
        'python-dateutil>=2.8',
        'tzlocal>=4.0'
    ],
    extras_require={
        'test': ['pytest>=7.0']
    },
    include_package_data=True,
    entry_points={
        "console_scripts": "pocketdump=pocketdump.pocketdump:main"
    },
    keywords='cli bookmarks pocket export utility',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: End Users/Desktop',
        'Natural Language :: English',
        'Operating System :: POSIX',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.8',
        'Topic :: Utilities'
    ]
)
