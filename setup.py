# Usage: python setup.py bdist_wheel

import setuptools  # type: ignore

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='clausal',
    version='0.1',
    description="Disjunctive and conjunctive normal forms of boolean conditions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(
        exclude=['tests']
    ),
    python_requires='>=3.11',
    install_requires=[
        'sympy',
        'pyeda',
        'typing_extensions',
        'ipython'
    ],
    extras_require={
        'test': ['pytest']
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
