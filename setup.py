# setup.py
from setuptools import setup, find_packages

setup(
    name="carlae",
    version="0.1.0",
    description="A small tree-walking interpreter for the Carlae expression language",
    packages=find_packages(include=["carlae", "carlae.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["carlae=carlae.repl:main"],
    },
    zip_safe=False,
)
