from setuptools import setup

from tabulator import __version__ 

setup(
    name='tabulator',
    version=__version__ ,
    description='Print several blocks of text side by side, each word-wrapped to its own column width.',
    license='Apache-2.0',
    py_modules=[
        'column',
        'tabulator'
    ],
    python_requires='>=3.6.0',
    extras_require={
        'test': ['pytest>=7.0']
    },
    entry_points={
        'console_scripts': [
            'tabulator = tabulator:main'
        ]
    }
)
