from setuptools import find_packages, setup

setup(
    name="gl-driver-switch",
    version="0.1.0",
    description="Switch the active GLX/OpenGL driver by re-pointing the system GL library links",
    packages=find_packages(include=["glswitch", "glswitch.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI framework (0.26+ vendors its own click)
        "click",  # Context and exception types used alongside Typer
        "rich",  # Terminal formatting
        "pydantic>=2",  # Configuration and output schemas
        "PyYAML",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "gl-driver-switch=glswitch.cli:main",
        ],
    },
)
