from setuptools import setup, find_packages

setup(
    name="tabprinter",
    version="0.1.0",
    description="Formatted, styled and paginated tables for the terminal",
    packages=find_packages(include=["tabprinter", "tabprinter.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
