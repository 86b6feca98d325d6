from setuptools import setup, Extension
from Cython.Build import cythonize

# Compile the DP engine; the pure-Python module is used if this fails
extensions = [
    Extension(
        "levenshtein_engine.engine",
        ["src/levenshtein_engine/engine.py"],
        include_dirs=[],
        language="c",
        optional=True,
    ),
]

setup(
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            'language_level': 3,
            'boundscheck': True,  # Enable bounds checking for safety
            'wraparound': False,
            'cdivision': True,
            'nonecheck': False,
        }
    ),
    zip_safe=False,
)
