# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="mdtoc",
    version="0.1.0",
    description="Generate a navigable README.md table of contents for every folder of a Markdown documentation tree",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["mdtoc", "mdtoc.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'mdtoc=mdtoc.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
