# setup.py
from setuptools import setup, find_packages

setup(
    name="geomath",
    version="1.0.0",
    description="3D/4D vectors, 4x4 matrices and quaternions over NumPy floating types",
    packages=find_packages(include=["geomath", "geomath.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
