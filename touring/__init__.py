from .geometry import Point, distance
from .tour import Tour
from .modes import FIRST, NEAREST, CHEAPEST, MODES, insert, build_tour
from .builder import TourBuilder
from .instance import PointSet
from .experiments import ExperimentConfig, run_repeated_trials, run_size_sweep
