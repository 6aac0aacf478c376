from setuptools import find_packages, setup

setup(
    name="fem-finitedef",
    version="0.1.0",
    description="Total Lagrangian kinematics for nonlinear finite elements",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
