#!/usr/bin/env python3

import os
from setuptools import setup, find_packages

here = os.path.dirname(os.path.abspath(__file__))
with open(os.path.join(here, "requirements.txt")) as f:
    reqs = [line.strip() for line in f if line.strip()]

setup(
    name='polyroots',
    version='1.0',
    description='Monic polynomial coefficients from roots given in bases 2-36',
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.5",
    entry_points={"console_scripts": "polyroots=polyroots.main:run"},
    install_requires=reqs,
    )
