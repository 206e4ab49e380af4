#!/usr/bin/env python

from setuptools import setup

setup(
    name="partsource",
    version="0.1.0",
    description="Read-only repository of named, versioned part files",
    packages=["partsource", "partsource.api"],
    include_package_data=True,
    zip_safe=False,
    keywords=["parts", "library"],
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Topic :: Software Development :: Libraries",
    ],
    python_requires=">=3.10",
    install_requires=[
        "fastapi[all]",
        "python-dotenv",
        "pydantic>=2",
        "pydantic-settings",
        "uvicorn",
    ],
    extras_require={
        "dev": [
            "pytest",
            "httpx",
            "mypy",
            "flake8",
        ]
    },
    entry_points={
        "console_scripts": [
            "partsource = partsource.__main__:main"
        ]
    },
)
