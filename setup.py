from setuptools import setup, find_packages

setup(
    name="connect4",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "filelock",  # Locking for the shared score file
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["connect4=connect4.interfaces.cli:main"],
    },
)
