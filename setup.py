from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="LazyTools",
    version=version,
    description="Lazy combinatorial generators and iterator building blocks",
    long_description=long_description,
    keywords=['combinations', 'permutations', 'product', 'itertools',
              'lazy', 'iterator', 'generator'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Intended Audience :: Developers"],
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.8",
    install_requires=[
        'tblib'],
    extras_require={
        'tests': [
            'pytest', 'pytest-timeout', 'coverage']
    }
)
