from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="errlist",
    version="0.3.0",
    author="The errlist Authors",
    description="Ordered aggregation of independent failures into one exception.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "dev", "examples")),
    python_requires=">=3.9",
    entry_points={"console_scripts": ["errlist = errlist.cli:main"]},
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
)
