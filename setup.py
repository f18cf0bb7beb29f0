# setup.py
from setuptools import setup

setup(
    name='densemx',
    version='0.1.0',
    description='Small generic dense matrix library: arithmetic, transpose and Kronecker product',
    package_dir={'': 'src'},
    packages=['dmx'],
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.7',
)
