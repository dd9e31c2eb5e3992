"""Setup script for scalarff-py package."""

from setuptools import setup, find_packages

setup(
    name="scalarff-py",
    description="Generic quadratic residue and square root algorithms over prime fields",
    use_scm_version={"fallback_version": "0.4.3"},
    setup_requires=['setuptools_scm'],
    packages=find_packages(include=["fields", "residues"]),
    include_package_data=True,
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "scalarff-residues=residues.cli:main",
        ],
    },
)
