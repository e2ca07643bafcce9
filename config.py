# config.py
# Paths, empty defaults and tunables (no sample data)

from pathlib import Path
from types import MappingProxyType

from models import ColorClasses

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"

TRANSACTIONS_FILE = DATA_DIR / "transactions.json"
BUDGETS_FILE = DATA_DIR / "budgets.json"

# Empty defaults, CSV is the primary data source
EMPTY_TRANSACTIONS = []
EMPTY_BUDGETS = []

# Recurring bills due within this many days of the reference date are "soon"
SOON_WINDOW_DAYS = 5

DEFAULT_SORT = "date:desc"
DEFAULT_PAGE_SIZE = 10
PAGE_SIZES = [5, 10, 20, 50]

# Levenshtein normalized similarity (0..1) needed for a fuzzy search hit
FUZZY_THRESHOLD = 0.75

COLOR_MAP = MappingProxyType({
    "Green": ColorClasses(background="bg-green", foreground="text-green"),
    "Yellow": ColorClasses(background="bg-yellow", foreground="text-yellow"),
    "Cyan": ColorClasses(background="bg-cyan", foreground="text-cyan"),
    "Navy": ColorClasses(background="bg-navy", foreground="text-navy"),
    "Red": ColorClasses(background="bg-red", foreground="text-red"),
    "Purple": ColorClasses(background="bg-purple", foreground="text-purple"),
    "Pink": ColorClasses(background="bg-pink", foreground="text-pink"),
    "Turquoise": ColorClasses(background="bg-turquoise", foreground="text-turquoise"),
    "Brown": ColorClasses(background="bg-brown", foreground="text-brown"),
    "Magenta": ColorClasses(background="bg-magenta", foreground="text-magenta"),
    "Blue": ColorClasses(background="bg-blue", foreground="text-blue"),
    "Navy Gray": ColorClasses(background="bg-navyGray", foreground="text-navyGray"),
    "Army Green": ColorClasses(background="bg-armyGreen", foreground="text-armyGreen"),
    "Gold": ColorClasses(background="bg-gold", foreground="text-gold"),
    "Orange": ColorClasses(background="bg-orange", foreground="text-orange"),
    "Beige": ColorClasses(background="bg-beige-100", foreground="text-beige-100"),
})
DEFAULT_COLOR = ColorClasses(background="bg-gray-500", foreground="text-gray-500")

# Hex swatches for charts (Streamlit cannot use the CSS class names)
COLOR_HEX = MappingProxyType({
    "Green": "#277C78",
    "Yellow": "#F2CDAC",
    "Cyan": "#82C9D7",
    "Navy": "#626070",
    "Red": "#C94736",
    "Purple": "#826CB0",
    "Pink": "#AF81BA",
    "Turquoise": "#597C7C",
    "Brown": "#93674F",
    "Magenta": "#934F6F",
    "Blue": "#3F82B2",
    "Navy Gray": "#97A0AC",
    "Army Green": "#7F9161",
    "Gold": "#CAB361",
    "Orange": "#BE6C49",
    "Beige": "#98908B",
})
DEFAULT_COLOR_HEX = "#696868"
