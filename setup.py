"""
Setup script for GPX Walk
"""

from setuptools import setup, find_packages

setup(
    name="gpx-walk",
    version="1.0.0",
    description="Extract, transform and visualise GPX track files",
    author="GPX Walk Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "gpxpy>=1.5.0",
        "numpy>=1.19.0",
        "opencv-python-headless>=4.5.0",
        "geojson>=3.0.0",
        "PyYAML>=5.4",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pyproj>=3.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gpx-walk=gpx_walk.main:main",
        ],
    },
)
