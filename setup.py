import os
from setuptools import find_packages, setup

version_string = os.environ.get("ARTIFACT_VERSION", "0.0.0.dev0")

setup(
    name="sto-s3-signer",
    description="S3 request signing (signature V2 and V4) and client.",
    author="STO",
    packages=find_packages("src"),
    version=version_string,
    package_dir={"": "src"},
    python_requires=">=3.8",
    entry_points={"console_scripts": [
        "sto-s3-signer=s3_signer.commands:run"
    ]},
    install_requires=[
        "PyYAML>=6.0.1",
        "requests>=2.32.3",
        "setuptools>=70.1.1",
        "fire>=0.7.0",
    ],
    extras_require={
        "dev": [
            "black==24.4.2",
            "flake8==7.1.0",
            "isort==5.13.2",
            "pre-commit==3.7.1",
        ],
        "test": [
            "pytest>=8.2.2",
            "coverage>=7.5.4",
            "deepdiff>=7.0.1",
            "requests-mock>=1.12.1",
        ],
    },
    tests_require=[
        "pytest>=8.2.2",
        "coverage>=7.5.4",
        "deepdiff>=7.0.1",
        "requests-mock>=1.12.1",
    ],
    test_suite="tests",
)
