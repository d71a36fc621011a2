import os

from setuptools import find_packages, setup


def read_version_metadata():
    """
    Read the metadata in `termunify/version.py` without importing the
    package, whose dependencies might not be installed yet.
    """
    metadata = {}
    version_file = os.path.join(
        os.path.dirname(os.path.realpath(__file__)), "termunify", "version.py"
    )
    with open(version_file) as f:
        exec(f.read(), metadata)
    return metadata


def read_requirements(file_name):
    requirements_file = os.path.join(
        os.path.dirname(os.path.realpath(__file__)), file_name
    )
    with open(requirements_file) as requirements:
        return [
            r.strip() for r in requirements.readlines()
            if r.strip() and not r.strip().startswith('#')
        ]


if __name__ == "__main__":
    metadata = read_version_metadata()
    setup(
        name=metadata["NAME"],
        version=metadata["VERSION"],
        description=metadata["DESCRIPTION"],
        long_description=metadata["LONG_DESCRIPTION"],
        license=metadata["LICENSE"],
        platforms=metadata["PLATFORMS"],
        classifiers=metadata["CLASSIFIERS"],
        packages=find_packages(exclude=["benchmarks", "benchmarks.*"]),
        package_data=metadata["PACKAGE_DATA"],
        python_requires=">=3.7",
        install_requires=read_requirements("requirements.txt"),
        extras_require={"test": read_requirements("requirements-test.txt")},
    )
