"""
setup.py

Сборка пакета и Cython расширения для хеширования позиций.

ВАЖНО: Перед компиляцией установите системные зависимости:
  Ubuntu/Debian: sudo apt-get install python3-dev build-essential
  Fedora/RHEL: sudo dnf install python3-devel gcc gcc-c++ make
  Arch: sudo pacman -S python base-devel

Использование:
    pip install -e .[test]
    python setup.py build_ext --inplace
"""

from setuptools import setup, Extension, find_packages
from Cython.Build import cythonize

extensions = [
    Extension(
        "core.fast_hash",
        ["core/fast_hash.pyx"],
        extra_compile_args=["-O3"],
    ),
]

setup(
    name="chomp_solver",
    version="1.0.0",
    description="Retrograde solver for the game of Chomp",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["chomp-solver=main:main"],
    },
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
            "boundscheck": False,
            "wraparound": False,
        }
    ),
    zip_safe=False,
)
