#!/usr/bin/env python3
"""
Setup script for the File Explorer package
"""

from setuptools import setup, find_packages
from pathlib import Path

def get_version():
    """Extract version from __init__.py"""
    init_file = Path(__file__).parent / "file_explorer" / "__init__.py"
    with open(init_file, "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"

def get_long_description():
    """Read README.md for package description"""
    readme_file = Path(__file__).parent / "README.md"
    if readme_file.exists():
        with open(readme_file, "r", encoding="utf-8") as f:
            return f.read()
    return "File Explorer - minimal interactive console file browser"

# Define dependency groups
INSTALL_REQUIRES = [
    "jsonschema>=4.0.0",
]

TEST_REQUIRES = [
    "pytest>=7.0.0",
    "pytest-cov>=3.0.0",
]

LINT_REQUIRES = [
    "black>=22.0.0",
    "flake8>=4.0.0",
    "mypy>=0.950",
    "isort>=5.10.0",
]

setup(
    name="file-explorer",
    version=get_version(),
    author="File Explorer Team",
    description="Minimal interactive console file browser with text preview",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",

    # Package configuration
    packages=find_packages(exclude=["tests*", "*.tests", "*.tests.*"]),
    include_package_data=True,
    zip_safe=False,

    python_requires=">=3.8",

    install_requires=INSTALL_REQUIRES,

    extras_require={
        "test": TEST_REQUIRES,
        "lint": LINT_REQUIRES,
        "dev": TEST_REQUIRES + LINT_REQUIRES,
    },

    entry_points={
        "console_scripts": [
            "file-explorer=file_explorer.__main__:main",
            "fx=file_explorer.__main__:main",  # Short alias
        ],
    },

    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: System :: Filesystems",
        "Topic :: Utilities",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],

    keywords="file browser console directory preview",
    platforms=["any"],
)
