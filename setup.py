from setuptools import setup, find_packages

setup(
    name="untitled-dm",
    version="0.0.1",
    description="Minimal terminal menu for picking and launching a session or command.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "prompt_toolkit>=3.0.29",
        "rich>=13.0",
        "pydantic>=2.0",
        "toml>=0.10",
        "PyYAML>=6.0",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "untitled-dm=untitled_dm.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Environment :: Console",
        "Development Status :: 3 - Alpha",
    ],
)
