from setuptools import setup, find_packages

setup(
    name="namedlog",
    version="1.0.0",
    description="Named loggers with colored console output and per-level log files",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        # Configuration model and validation
        "pydantic>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.10",
    package_dir={"": "."},
)
