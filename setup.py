# setup.py
from setuptools import setup, find_packages

setup(
    name="policy_scout",
    version="0.1.0",
    description="Google Play developer privacy policy dataset curator",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "playwright>=1.40",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "policy-scout=policy_scout.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
