from setuptools import setup, find_packages

setup(
    name='pkdex',
    version='0.1',
    zip_safe=False,
    packages=find_packages(),
    install_requires=[
        'construct>=2.10,<2.11',
        'attrs>=19.1',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'pkdex = pkdex.main:setuptools_entry',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
    ]
)
