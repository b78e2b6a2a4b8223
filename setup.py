from setuptools import setup

setup(
    name="avltree",
    version="0.0.1",
    description="ordered container backed by an avl tree",
    author="thejchap",
    packages=["avltree"],
    install_requires=["structlog"],
    extras_require={
        "dev": [
            "black",
            "pylint",
            "flake8",
            "mypy",
            "pytest",
        ],
    },
    entry_points={"console_scripts": ["avltree=avltree.cli:main"]},
)
