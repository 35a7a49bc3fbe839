from setuptools import setup, find_packages

setup(
    name="steelhinge",
    version="0.1.0",
    description="Nonlinear hinge parameters for steel beams, braces and columns, written into SAP2000 $2k model files",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    package_data={"steelhinge": ["data/*.yaml"]},
    include_package_data=True,
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "plotly>=5.17.0",
        "pydantic>=2.0.0",
        "pyyaml>=6.0",
        "loguru>=0.7.0",
        "openpyxl>=3.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "steelhinge=steelhinge.cli:main",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
