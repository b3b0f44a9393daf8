# Shared defaults for the sampling designs and estimators

# Tolerance used when comparing probability sums
DEFAULT_EPS = 1e-12

# Largest accepted tolerance
EPS_UPPER_BOUND = 0.1

# Attempts allowed in rejection loops (Sampford)
DEFAULT_MAX_ITERATIONS = 1000

DEFAULT_CONFIDENCE_LEVEL = 0.95

# Environment variable pointing to a TOML logging configuration
LOG_CFG_ENV = "PPSAMPLE_LOG_CFG"
LOG_CFG_FILE = "logging_config.toml"
