#!/usr/bin/env python3
"""
Setup script for paracurve - A Python library for parametric planar curves.
"""

import pathlib

from setuptools import find_packages, setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
README = (
    (HERE / "README.md").read_text(encoding="utf-8")
    if (HERE / "README.md").exists()
    else "A Python library for parametric planar curves."
)

setup(
    name="ParaCurve-Py",
    version="0.1.0",
    description="A Python library for parametric planar curves and their tangent slopes",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Your Name",
    author_email="your.email@example.com",
    url="https://github.com/yourusername/paracurve",
    packages=find_packages(include=["paracurve", "paracurve.*"]),
    python_requires=">=3.8",
    install_requires=[
        # Core dependencies
        "numpy>=1.20.0",
        # Plotting and visualization
        "matplotlib>=3.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "pytest-cov>=2.10.0",
            "black>=21.0.0",
            "flake8>=3.8.0",
            "mypy>=0.800",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="geometry, curves, parametric, tangent, circle",
    include_package_data=True,
    zip_safe=False,
    entry_points={
        "console_scripts": [
            "paracurve-demo=paracurve.demo:main",
        ],
    },
)
