from setuptools import setup, find_packages
import os

# Import version from ConfigOptions/__init__.py
import re
with open(os.path.join('ConfigOptions', '__init__.py'), 'r') as f:
    version = re.search(r"__version__\s*=\s*'(.*)'", f.read()).group(1)

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="ConfigOptions",
    version=version,
    description="A configuration hash with layered merging and cached option files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Artistic License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.7",
    install_requires=[
        "PyYAML>=5.1",
        "click>=8.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "configoptions=ConfigOptions.cli.commands:main",
        ],
    },
)
