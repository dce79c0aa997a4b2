from setuptools import find_packages, setup

classifiers = [
    "Environment :: Console",
    "License :: OSI Approved :: MIT License",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.8",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3 :: Only",
    "Topic :: Software Development :: Libraries",
    "Topic :: Terminals",
]

with open("README.md", "r") as fp:
    long_description = fp.read()

setup(
    name="term-spin",
    version="0.3.0",
    description="Multi-line terminal spinners",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=classifiers,
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=["typing_extensions>=4.8.0"],
    extras_require={"test": ["pytest"]},
    keywords=[
        "spinner",
        "terminal",
        "progress",
        "console",
        "xterm",
        "library",
        "cli",
        "ANSI",
        "threading",
    ],
)
