from setuptools import find_packages, setup

setup(
    name="optscan",
    version="0.1.0",
    description="Catalogue-driven command-line option scanner with BASIC, POSIX and GNU dialects.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=("tests", "tests.*", "examples", "examples.*")),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "python-dateutil>=2.8",
        "toml>=0.10",
        "PyYAML>=6.0",
        "python-json-logger>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["optscan=optscan.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
