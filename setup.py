from os import path
from setuptools import find_packages, setup

version_info = {}
with open("double_ended_peekable/_version.py") as version_file:
    exec(version_file.read(), version_info)

PWD = path.abspath(path.dirname(__file__))
with open(path.join(PWD, "README.md"), encoding="utf-8") as readme:
    long_description = readme.read()

setup(
    name="double-ended-peekable",
    version=version_info["__version__"],
    author=version_info["__author__"],
    author_email=version_info["__author_email__"],
    description="Peek at, and conditionally consume, both ends of double-ended iterators.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Topic :: Software Development :: Libraries",
    ],
    packages=find_packages(exclude=("tests",)),
    python_requires=">=3.7",
    install_requires=[
        "interface_meta>=1.2",
        "typing_extensions>=4.0",
        "wrapt>=1.0",
    ],
    extras_require={
        "test": [
            "black>=22.1.0",
            "flake8>=4.0.1",
            "pytest>=6.2.5",
            "pytest-cov>=3.0.0",
        ],
    },
)
