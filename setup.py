from setuptools import setup, find_namespace_packages

setup(
    name="libms",
    version="0.1.0",
    packages=find_namespace_packages(include=['libms*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "bcrypt",
    ],
    extras_require={
        "mysql": ["PyMySQL"],  # Only needed with TEST_DB_DRIVER=mysql
        "test": ["pytest", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "libms=libms.cli.main:main",
        ],
    },
)
