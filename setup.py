from pathlib import Path

from setuptools import find_packages, setup

setup(
    name="mapgraph",
    version=Path("./mapgraph/VERSION").read_text().strip(),
    description="Place nodes and edges over an image and save them as a graph",
    packages=find_packages(include=["mapgraph", "mapgraph.*"]),
    package_data={"mapgraph": ["VERSION"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "opencv-python",
        "easydict",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["mapgraph=mapgraph.cli:main"],
    },
)
