from setuptools import setup, find_packages

setup(
    name="flagbind",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0",
        "structlog",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    description="Map command-line arguments to dictionaries and dataclass or pydantic records.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
