"""Setup the python module."""
from setuptools import setup, find_packages  # type: ignore

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

install_requires = [
    "requests<=2.32.3,>=2.23.0",
    "Rich<=13.9.4",
    "shtab<=1.7.1",
]

setup(
    name="freenas-sdk",
    description="FreeNAS storage appliance Python SDK",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    long_description=long_description,
    long_description_content_type="text/markdown",
    include_package_data=True,
    install_requires=install_requires,
    entry_points={
        "console_scripts": ["freenas=freenas.cli:cli_main"],
    },
    extras_require={
        "dev": [
            "twine==4.0.2",
            "wheel==0.38.4",
            "pytest==7.2.0",
            "black==22.12.0",
            "mypy==0.991",
            "pylint==2.15.9",
            "pycodestyle==2.8.0",
            "pydocstyle==6.2.2",
            "flake8==4.0.1",
            "pytest-cov>=4.0.0",
            "pytest-randomly==3.12.0",
            "types-requests",
        ]
    },
)
