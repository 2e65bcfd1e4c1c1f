from setuptools import setup, find_packages
import pathlib


here = pathlib.Path(__file__).parent
try:
    long_description = (here / "README.md").read_text(encoding="utf-8")
except Exception:
    long_description = "cumulfreqtable — cumulative frequency tables: linear array and binary indexed (Fenwick) tree."

setup(
    name="cumulfreqtable",
    version="0.1.0",
    description="Cumulative frequency tables backed by a linear array or a binary indexed (Fenwick) tree",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Quentin Duchemin",
    author_email="quentin.duchemin@epfl.ch",
    url="",
    packages=find_packages(exclude=("package_docs", "docs", "examples", "tests")),
    python_requires='>=3.10',
    install_requires=[
        "numpy",
        "pandas",
        "tqdm",
    ],
    extras_require={
        "dev": [
            "pytest",
        ]
    },
    entry_points={
        "console_scripts": [
            "cumulfreqtable-bench=CumulFreqTable.benchmark:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
