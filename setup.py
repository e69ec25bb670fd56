import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="binarypack",
    version="0.0.1",
    author="Gianluca Pacchiella",
    author_email="gp@ktln2.org",
    description="Pack and unpack values following a struct-like format",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/gipi/binarypack",
    packages=setuptools.find_packages(exclude=['tests']),
    scripts=['scripts/binpack.py'],
    install_requires=[
        'bitstring>=4.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GPLv2 License",
        "Operating System :: OS Independent",
    ],
)
