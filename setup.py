"""
setup.py

Установка пакета решателя Huarong Dao.

Использование:
    pip install -e .            # сам решатель
    pip install -e ".[test]"    # вместе с pytest
    huarong-solver              # консольная команда (то же, что python main.py)
"""

from setuptools import setup

setup(
    name="huarong_solver",
    version="1.0.0",
    description="Huarong Dao (Klotski) Solver: BFS with Zobrist hashing",
    packages=["core", "solvers", "solutions", "huarong_io", "utils"],
    py_modules=["main"],
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "huarong-solver=main:main",
        ],
    },
    zip_safe=False,
)
