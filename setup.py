#!/usr/bin/env python
from pathlib import Path

from setuptools import find_packages, setup

here = Path(__file__).parent.absolute()
long_description = (here / "README.md").read_text(encoding="utf-8")

setup(
    name="kubewait",
    use_scm_version={"fallback_version": "0.1.0"},
    setup_requires=["setuptools_scm"],
    description="""kubewait: Wait for eventually-consistent Kubernetes state in integration tests""",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="kubewait developers",
    include_package_data=True,
    install_requires=[
        "kubernetes>=29.0.0",
        "pydantic>=2.10.4,<3",
        "tenacity>=8.2.3",
    ],
    python_requires=">=3.10,<4",
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-timeout>=2.2.0,<3",
            "pytest-mock",
        ],
        "lint": [
            "ruff>=0.11.7",
            "mypy>=1.18.2,<2",
        ],
        "release": [
            "setuptools>=75.6.0",
            "wheel",
            "twine",
        ],
    },
    license="Apache-2.0",
    zip_safe=False,
    keywords="kubernetes testing",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"kubewait": ["py.typed"]},
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Operating System :: MacOS",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
