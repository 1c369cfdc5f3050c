from setuptools import find_packages, setup

setup(
    name='featureloc',
    version="1.0.0",
    packages=find_packages(include=["featureloc", "featureloc.*"]),
    install_requires=[
        "benchbuild>=6.8",
        "click>=8.1.3",
        "plumbum>=1.6",
        "PyYAML>=6.0",
        "rich>=12.6",
        "tabulate>=0.9",
    ],
    extras_require={"test": ["pytest", "pytest-cov"]},
    entry_points={
        "console_scripts": [
            'fl = featureloc.tools.driver_fl:main',
            'fl-config = featureloc.tools.driver_config:main',
        ]
    },
    python_requires='>=3.9'
)
