from setuptools import find_packages, setup

NAME = "register-receipt"

setup(
    name=NAME,
    version="0.1.0",
    description="Point-of-sale receipt calculator with sales tax and import duty",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["openpyxl"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["register=receipt.cli:main"]},
)
