from setuptools import find_packages, setup

setup(
    name="goagent",
    version="0.1.0",
    description="GoCD agent service renderer - provisions and supervises a GoCD agent under systemd",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Config validation and output schemas
        "typer<0.26",  # CLI (0.26+ vendors its own click; code uses click exceptions/context)
        "click",  # CLI exceptions and context
        "rich",  # Terminal formatting
        "jinja2",  # Template rendering for unit files and start script
        "PyYAML",  # YAML CLI output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "goagentc=goagent.cli:main",
        ],
    },
)
