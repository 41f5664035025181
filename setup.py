from setuptools import setup, find_packages

setup(
    name="pylrun",
    version="0.1.0",
    description="pylrun - Python binding for the lrun resource-limiting sandbox",
    author="pylrun Team",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "python-dotenv>=1.0.1",
        "PyYAML>=6.0.2",
    ],
    extras_require={
        "test": [
            "pytest>=8.3.2",
        ],
    },
)
