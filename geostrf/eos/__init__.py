import importlib as _importlib
from .tools import load_eos, vectorize_eos
from .gsw import specvol, specvol_SSO_0, specvol_anom, SSO

modules = ["gsw", "tools"]

__all__ = modules + [
    k for (k, v) in locals().items() if callable(v) and not k.startswith("_")
]  # all local, public functions


def __dir__():
    return __all__


# Lazy load of submodules
def __getattr__(name):
    if name in modules:
        return _importlib.import_module(f"geostrf.eos.{name}")
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(f"Module 'geostrf.eos' has no attribute '{name}'")
