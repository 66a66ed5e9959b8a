# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

from setuptools import setup
from Cython.Build import cythonize

modules = [\
    "mbase64"\
]

setup(
    name = 'mbase64',
    version = '0.1.0',
    description = 'Standard base64 codec with strict, typed decode errors.',
    py_modules = modules + ["llog", "mb64"],
    ext_modules = cythonize(\
        [x + ".py" for x in modules],
        compiler_directives={"language_level": "3"}),
    extras_require = {
        "test": ["pytest"],
    },
    entry_points = {
        "console_scripts": ["mb64 = mb64:main"],
    },
)
