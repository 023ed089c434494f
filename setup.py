from setuptools import setup, find_packages

setup(
    name="connectfour",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",  # Flat board vector and window sums
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connectfour=connectfour.interfaces.cli:main",
        ],
    },
)
