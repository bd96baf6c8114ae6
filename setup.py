from setuptools import setup, find_packages

setup(
    name="ratmat",
    version="1.0",
    description="Exact linear algebra over the rational numbers",
    long_description=("Dense matrices with exact rational entries: arithmetic, transposition, row echelon and "
                      "reduced row echelon forms, rank, determinant and inverse without rounding errors"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["ratmat", "ratmat.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={"tests": ["pytest", "pytest-timeout"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "rational numbers", "exact arithmetic", "gaussian elimination"],
    zip_safe=False,
)
