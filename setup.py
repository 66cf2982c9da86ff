# setup.py
from setuptools import setup, find_packages

setup(
    name="plainlog",
    version="0.1.0",
    description="Leveled console/file logger with colors, tags and size-based rotation",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # Encuentra automáticamente la carpeta 'plainlog'
    python_requires=">=3.8",
    install_requires=[
        "colorama>=0.4.6",  # Códigos ANSI de la consola
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
