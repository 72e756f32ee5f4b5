from setuptools import setup, find_packages

setup(
    name="service-locator",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.0.0",
        "rich>=13.0.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0"
        ],
    },
    entry_points={
        "console_scripts": [
            "service-locator-demo=service_locator.presentation.cli.demo_command:main",
        ],
    },
    python_requires=">=3.10",
)
