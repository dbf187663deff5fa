"""Setup configuration for ffd-packing."""
from setuptools import setup, find_packages

setup(
    name="ffd-packing",
    version="0.1.0",
    description="One-dimensional bin packing with the First-Fit-Decreasing heuristic",
    author="",
    author_email="",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.0",
        "pyyaml>=6.0.0",
        "numpy>=2.2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=9.0.0",
            "pytest-cov>=6.0.0",
            "ruff>=0.15.0",
            "mypy>=1.19.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ffd-pack=ffd_packing.runner.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
