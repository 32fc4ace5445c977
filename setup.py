from setuptools import find_packages, setup

setup(
    name="catalog",
    version="0.1.0",
    packages=find_packages(include=["catalog", "catalog.*"], exclude=["catalog.tests", "catalog.tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click",
        "pandas",
        "python-dotenv",
        "SQLAlchemy>=2.0"
    ],
    extras_require={"dev": ["pytest"]},
    entry_points={"console_scripts": ["catalog=catalog.cli.main:cli"]},
)
