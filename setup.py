import setuptools

with open("README.rst", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="opticalmodes",
    version="0.1.0",
    author="opticalmodes developers",
    description="Optical elements with swappable behavior modes and "
                "operations dispatched over element collections",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    keywords=['optical elements', 'behavior modes', 'element model'],
    install_requires=[
        "anytree>=2.8.0",
        ],
    extras_require={
        'test':  ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'opticalmodes-demo = opticalmodes.demo:main',
        ],
    },
)
