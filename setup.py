from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "defusedxml>=0.7.1",
]

# Optional test dependencies
test_requirements = [
    "pytest>=7.0.0",
]

setup(
    name="svg_builder",
    version="0.1.0",
    description="Programmatic builder for SVG documents: shapes, transforms and nested groups",
    packages=find_packages(include=["svg_builder", "svg_builder.*"]),
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "svg-builder=svg_builder.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
