#!/usr/bin/env python

'''
arcurls setup
'''

from setuptools import setup

setup(
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: System :: Archiving',
    ],
    description='Command line tool for finding the records in ARC files whose url matches a regular expression',
    entry_points="""
        [console_scripts]
        findarcurls=arcurls.findarcurls:run
    """,
    name='arcurls',
    packages=['arcurls', 'arcurls.scan'],
    install_requires=['warctools>=4.10'],
    extras_require={
        's3': ['boto'],
        'test': ['pytest'],
    },
    python_requires='>=3.6',
    version='1.0.0',
)
