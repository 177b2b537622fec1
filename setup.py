# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="memtree",
    version="0.1.0",
    description="Reconstruye árboles de directorios en memoria a partir de listados de texto",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["memtree", "memtree.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'memtree=memtree.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
