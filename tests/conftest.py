"""
tests/conftest.py

Общие фикстуры: решённые пространства небольших размеров.
"""

import os
import sys

# Добавляем корень проекта в путь
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from solvers import solve


@pytest.fixture(scope="session")
def cache_2x2():
    return solve(2, 2)


@pytest.fixture(scope="session")
def cache_4x4():
    return solve(4, 4)


@pytest.fixture(scope="session")
def cache_5x5():
    return solve(5, 5)
