from setuptools import setup, find_packages

setup(
    name="typedargs",
    version="0.1.0",
    description="Typed command-line argument definition and parsing engine.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="typedargs contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "toml>=0.10",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["typedargs=typedargs.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
