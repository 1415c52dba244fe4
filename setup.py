"""Setup file for the Inventory Search package."""

from setuptools import setup, find_packages

setup(
    name="inventory-search",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click",
        "pydantic>=2",
        "prometheus-client",
        "python-dotenv",
        "pyyaml",
        "rapidfuzz>=3",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "inventory-search=inventory_search.__main__:main",
        ],
    },
    author="Pimentel",
    author_email="pimentel@example.com",
    description="Fuzzy multi-field search and ranking for inventory catalogs",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/pimentel/inventory-search",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.9",
)
