from setuptools import find_packages, setup

setup(
    name="s3-event-pipeline",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pulumi>=3.50.0,<4.0.0",
        "pulumi-aws>=6.0.0,<7.0.0",
        "boto3>=1.26.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "pytest-cov",
            "moto>=5.0.0",
        ]
    },
    python_requires=">=3.9",
)
