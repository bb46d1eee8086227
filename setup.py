from setuptools import find_packages, setup

setup(
    name="xortool",
    version="0.1.0",
    description="Reversible repeating-key XOR for files and directory trees",
    packages=find_packages(include=["xortool", "xortool.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # Command line interface
        "rich",  # Terminal formatting and live progress line
        "pydantic>=2",  # Configuration models
        "numpy",  # Vectorised in-place XOR
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "xortool=xortool.cli:main",
        ],
    },
)
