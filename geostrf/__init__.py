__version__ = "1.0.0"

import importlib as _importlib

# Import from subpackages
from .eos import load_eos, vectorize_eos, specvol, specvol_SSO_0, specvol_anom
from .interp1d import interp_SA_CT, make_interpolator

# Import from modules
from .errors import *
from .funnel import *
from .dynheight import *
from .montgomery import *
from .geostrophy import *

# List of modules not explicitly imported above
modules = ["lib"]

__all__ = modules + [
    k for (k, v) in locals().items() if not k.startswith("_")
]  # all local, public functions


def __dir__():
    return __all__


# Lazy load of modules.
def __getattr__(name):
    if name in modules:
        return _importlib.import_module(f"geostrf.{name}")
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(f"Module 'geostrf' has no attribute '{name}'")
