from setuptools import setup, find_packages

setup(
    name="btrls",
    version="0.3.0",
    packages=find_packages(include=["btrls", "btrls.*"]),
    description="A tabled ls command with JSON export and a recursive tree view.",
    install_requires=[
        "rich",
        "tomli; python_version < '3.11'",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "btrls=btrls.cli:main",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
