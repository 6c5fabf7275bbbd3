"""
Priority Matrix setup.py — Package configuration.
"""

from setuptools import find_packages, setup

setup(
    name="priority-matrix",
    version="1.0.0",
    description="Priority Matrix — impact/urgency task prioritization",
    packages=find_packages(include=["prioritymatrix", "prioritymatrix.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
)
