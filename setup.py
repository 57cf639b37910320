from setuptools import find_packages, setup

setup(
    name="linkscheme",
    version="0.1.0",
    description="Render and open scheme-relative links for Markdown, HTML, LaTeX, Texinfo and plain text",
    packages=find_packages(include=["linkscheme", "linkscheme.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.12,<0.26",  # CLI (0.26+ vendors its own click)
        "click>=8.2",  # Typer context handling
        "pydantic>=2.0",  # Config and output schemas
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
        "pygments",  # Output highlighting on a terminal
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "linkscheme=linkscheme.cli:main",
        ],
    },
)
