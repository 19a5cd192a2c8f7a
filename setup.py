# setup.py
from setuptools import setup, find_packages

setup(
    name="oats",
    version="0.1.0",
    description="A small Scheme-family interpreter with proper tail calls and value-capturing closures",
    packages=find_packages(include=["oats", "oats.*"]),
    package_data={"oats": ["prelude.scm"]},
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["oats=oats.repl:main"],
    },
    zip_safe=False,
)
