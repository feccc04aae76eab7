from PyEOS80.utilities import arrays
from PyEOS80.utilities import general
