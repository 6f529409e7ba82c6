"""
Meeting Cost Policy

Fixed policy constants used by the cost engine.
Pure Python, NO Django imports.
"""

# Standard working hours: 40 hours/week * 52 weeks
HOURS_PER_YEAR = 2080

# 2080 / 12, kept as the rounded figure used for monthly salaries
HOURS_PER_MONTH = 173.33

MINUTES_PER_HOUR = 60

# Minimum meeting duration accepted from the form, in the selected unit
MIN_DURATION = 1

MAX_PARTICIPANTS = 20

# The open top bracket has no ceiling; its midpoint uses floor * 1.5 (500 -> 750)
OPEN_BRACKET_CEILING_FACTOR = 1.5

# Base salary brackets in USD per hour: (id, min, max). None marks the open bracket.
BASE_BRACKETS = (
    ("0-25", 0, 25),
    ("26-50", 26, 50),
    ("51-75", 51, 75),
    ("76-100", 76, 100),
    ("101-150", 101, 150),
    ("151-200", 151, 200),
    ("201-300", 201, 300),
    ("301-500", 301, 500),
    ("500+", 500, None),
)

BASE_CURRENCY = "USD"

# code -> (symbol, name, multiplier against USD)
# Multipliers are approximate and reflect exchange rates and local wage standards.
CURRENCIES = {
    "USD": ("$", "US Dollar", 1),
    "EUR": ("€", "Euro", 0.9),
    "GBP": ("£", "British Pound", 0.8),
    "JPY": ("¥", "Japanese Yen", 100),
    "CAD": ("C$", "Canadian Dollar", 1.3),
    "AUD": ("A$", "Australian Dollar", 1.4),
    "CNY": ("¥", "Chinese Yuan", 7),
    "INR": ("₹", "Indian Rupee", 75),
    "SGD": ("S$", "Singapore Dollar", 1.3),
    "MYR": ("RM", "Malaysian Ringgit", 4.5),
    "IDR": ("Rp", "Indonesian Rupiah", 15000),
    "BRL": ("R$", "Brazilian Real", 5),
}

# Currencies whose bracket labels use compact notation (25k, 1.5M)
COMPACT_LABEL_CURRENCIES = ("JPY", "IDR")

COMMON_TEAM_SIZES = (
    ("Just me", 1),
    ("Small huddle (2)", 2),
    ("Team meeting (5)", 5),
    ("Department (10)", 10),
    ("Large group (15+)", 15),
)
