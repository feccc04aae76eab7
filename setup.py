from setuptools import setup

version = '1.0.0'

setup(
    name='PyEOS80',
    packages=['PyEOS80', 'PyEOS80.utilities'],
    version=version,
    description=("PyEOS80 is a collection of functions implementing the UNESCO 1983 (EOS-80) equation of state for "
                 "seawater: density, potential temperature, potential density and related quantities."),
    author='Pierre Cazenave',
    author_email='pica@pml.ac.uk',
    keywords=['seawater', 'equation of state', 'eos-80', 'unesco', 'oceanography'],
    license='MIT',
    platforms='any',
    python_requires='>=3.6',
    install_requires=['numpy>=1.13.0'],
    extras_require={'test': ['pytest']},
    classifiers=[]
)
