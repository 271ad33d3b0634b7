try:
    import tomllib
except ImportError:
    import tomli as tomllib

# Members every active group must contribute
DEFAULT_GROUP_SIZE = 4

# Items selected across the whole configuration
DEFAULT_TOTAL = 16

# Cap on enumerated solutions
DEFAULT_MAX_SOLUTIONS = 10

# Oracle backends
BACKEND_Z3 = "z3"
BACKEND_PYSAT = "pysat"
BACKENDS = (BACKEND_Z3, BACKEND_PYSAT)
DEFAULT_BACKEND = BACKEND_Z3

# PySAT solver used when none is requested (Glucose 3)
DEFAULT_PYSAT_SOLVER = "g3"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
