from setuptools import find_packages, setup

with open("requirements.txt", "r", encoding="UTF-8") as f:
    required = f.read().splitlines()

with open("requirements-dev.txt", "r", encoding="UTF-8") as f:
    required_dev = f.read().splitlines()

setup(
    name="yieldquote",
    version="0.1",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"yieldquote.abi": ["*.json"]},
    python_requires=">=3.10",
    install_requires=required,
    extras_require={"test": required_dev},
)
