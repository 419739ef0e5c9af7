from setuptools import setup, find_packages

setup(
    name="value_iteration",
    version="0.1.0",
    description="Recursive Bellman utility evaluation for Markov Decision Processes",
    packages=find_packages(),
    install_requires=[
        "numpy>=1.24.0",
    ],
    python_requires=">=3.8",
)
