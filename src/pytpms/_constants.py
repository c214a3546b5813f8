"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# Tire layout
# ------------------------------------------------------------------

ABSOLUTE_MAX_TIRES = 64
DEFAULT_TIRES_PER_AXLE = 4
MAX_TIRES_PER_AXLE = 6

UNSET_INDEX = -1

# ------------------------------------------------------------------
# Pressure  (kPa is the canonical unit)
# ------------------------------------------------------------------

PSI_PER_KPA = 0.14503773773020923
KPA_PER_PSI = 1.0 / PSI_PER_KPA  # 6.89475729316836
KPA_PER_BAR = 100.0
BAR_PER_KPA = 1.0 / KPA_PER_BAR
BAR_PER_PSI = BAR_PER_KPA * KPA_PER_PSI  # 0.06894757293168
PSI_PER_BAR = PSI_PER_KPA * KPA_PER_BAR  # 14.50377377302092

PRESSURE_LIMIT_HI = 999.0
INVALID_PRESSURE = -999.0

# ------------------------------------------------------------------
# Temperature  (Celsius is the canonical unit)
# ------------------------------------------------------------------

TEMP_LIMIT_LO = -273.15  # absolute zero
TEMP_LIMIT_HI = 500.0
INVALID_TEMPERATURE = -9999.0

# ------------------------------------------------------------------
# Wire format
# ------------------------------------------------------------------

KEY_PREFIX = "T"
AXLE_SEPARATORS = frozenset({"_", "-"})
CANONICAL_AXLE_SEPARATOR = "-"
