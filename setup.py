import os

from setuptools import setup, find_packages

about = {}

_about_file = os.path.join(os.path.dirname(__file__), 'rpncalc', '__about__.py')
exec(open(_about_file).read(), about)

setup(
    name="rpncalc",
    version=about['__version__'],
    packages=find_packages(exclude=["test", "test.*"]),
    install_requires=[
        "attrs>=19.0",
        "click>=7.0",
        "jsonschema>=3.0",
        "packaging",
        "PyYAML>=5.4",
    ],
    extras_require={
        'test': [
            'PyHamcrest>=2.0.4',
            'pytest>=7.4',
        ],
    },
    package_data={
        'rpncalc.conf': ['*.json'],
    },
    python_requires=">=3.9",

    entry_points={
        "console_scripts": [
            "rpncalc=rpncalc.cli:main",
        ]
    },

    description="Arithmetic and logical expression calculator "
                "compiling infix expressions to reverse polish notation",

    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3 :: Only",
        "Environment :: Console",
        "Topic :: Scientific/Engineering :: Mathematics",
    ]
)
