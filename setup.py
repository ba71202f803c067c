import setuptools

with open('README.md') as f:
    long_description = f.read()

setuptools.setup(
    name='atomtk',
    version='0.1.0',
    description='Atom type perception toolkit',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(include=['atomtk', 'atomtk.*']),
    python_requires='>=3.7',
    install_requires=[
        'pandas',
        'rdkit',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['atomtk=atomtk.cli:main'],
    },
    classifiers=[
        'License :: OSI Approved :: GNU Lesser General Public License v2 or later (LGPLv2+)',
        'Operating System :: OS Independent'
    ]
)
