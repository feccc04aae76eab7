"""
The UNESCO 1983 (EOS-80) seawater equation of state toolbox (PyEOS80)

"""

__version__ = '1.0.0'
__author__ = 'Pierre Cazenave'
__credits__ = ['Pierre Cazenave', 'Michael Bedington', 'Ricardo Torres']
__license__ = 'MIT'
__maintainer__ = 'Pierre Cazenave'
__email__ = 'pica@pml.ac.uk'

from PyEOS80 import ocean
from PyEOS80 import utilities
