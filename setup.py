import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="lensbender",
    version="0.1.0",
    author="Michael J Hayford",
    author_email="mjhoptics@gmail.com",
    description="Ray traced rendering of spheres seen through refracting "
                "lenses",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    keywords=['geometric optics', 'ray tracing', 'refraction',
              'dispersion', 'sellmeier', 'lens', 'rendering'],
    install_requires=[
        "opticalglass",
        "numpy>=1.15.0",
        "pandas>=0.23.4",
        "attrs>=18.1.0",
        "transforms3d>=0.3.1"
        ],
    extras_require={
        'test':  ["pytest"],
    },
)
