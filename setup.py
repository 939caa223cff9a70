# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treegen",
    version="0.1.0",
    description="Generate file/folder trees from ASCII drawings or YAML/JSON/TOML/JSON5 mappings",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treegen", "treegen.*"]),
    package_data={"treegen": ["interface/locales/*.json"]},
    python_requires=">=3.11",
    install_requires=[
        "PyYAML>=6.0",
        "json5>=0.9",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'treegen=treegen.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
