from .config import Config, cfg
from .input_data import InputData
from .main import run_solver
from .people import UNFILLED, Named, Unfilled, choices

__all__ = [
    "Config",
    "cfg",
    "InputData",
    "run_solver",
    "Named",
    "Unfilled",
    "UNFILLED",
    "choices",
]
