import re
from setuptools import setup

__version__ ,= re.findall('__version__: str = "(.*)"', open('scribeconf/__init__.py').read())

setup(
    name = "scribeconf",
    version = __version__,
    packages = ['scribeconf'],

    requires = [],
    install_requires = [],

    extras_require = {
        "atomic_save": ["atomicwrites"],
        "test": ["pytest"],
    },

    package_data = {'scribeconf': ['py.typed']},

    test_suite = 'tests.__main__',

    python_requires = ">=3.7",

    description = "a parser for Scribe configuration files",
    license = "MIT",
    keywords = "scribe configuration parser lexer",
    long_description='''
scribeconf parses the Scribe configuration language into a tree of stores.

Main Features:
 - Hand-written state-machine lexer with line & column tracking
 - Recursive-descent parser that checks block nesting and closing tag names
 - Unicode keys and store names
 - Fail-fast, descriptive error messages with context
 - Writes trees back to configuration text
''',

    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing :: General",
        "License :: OSI Approved :: MIT License",
    ],
)
