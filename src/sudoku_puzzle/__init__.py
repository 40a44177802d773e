from .cell import Cell
from .config import GeneratorConfig, load_config, make_generator_config
from .constants import DIFFICULTY_TIERS, SUDOKU_RULES, format_grid
from .full_grid import FullGridGenerator, GenerationError
from .grid import Grid
from .puzzle import check_solved, generate, generate_for_difficulty
from .reducer import PuzzleReducer, ReductionStats
from .session import SudokuSession
from .solution_counter import SolutionCounter
from .verifier import StrongVerifier
from .batch import PuzzleRecord, generate_batch
