from setuptools import setup, find_packages

setup(
    name = "docprops",
    version = "0.1.0",
    packages = find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "loguru",
        "pydantic>=2.0",
        "PyYAML",
        "Pillow>=9.0",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "docprops = docprops.cli:cli",
        ],
    },
    python_requires = ">=3.9",
)
