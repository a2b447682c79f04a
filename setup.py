from setuptools import setup, find_packages

setup(
    name="zwo_timeline",
    version="0.1.0",
    packages=find_packages(include=["zwo_timeline", "zwo_timeline.*"]),
    install_requires=[
        "pandas>=2.0.0",
        "numpy>=1.24.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
)
